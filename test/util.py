import os
import platform
import tempfile

from shpiller.toolchain import has_toolchain

# Store testdir for safe switch back to directory:
testdir = os.path.dirname(os.path.abspath(__file__))


def relpath(*args):
    return os.path.normpath(os.path.join(testdir, *args))


def source_files(folder, extension):
    for filename in sorted(os.listdir(folder)):
        if filename.endswith(extension):
            yield os.path.join(folder, filename)


def new_temp_dir():
    """ Create a fresh directory for generated files """
    return tempfile.mkdtemp(prefix='shpiller_')


def write_source(folder, name, src):
    """ Write src into a source file in folder and return its path """
    filename = os.path.join(folder, name)
    with open(filename, 'w') as f:
        f.write(src)
    return filename


def has_linux():
    return platform.machine() == 'x86_64' and platform.system() == 'Linux'


def can_run_executables():
    """ Determine if generated programs can be built and run here """
    return has_linux() and has_toolchain()
