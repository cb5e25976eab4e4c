class BindingTable:
    """ Maps names introduced by 'let' to their integer value.

    A table belongs to a single parse. Binding a name again replaces
    the previous value.
    """
    def __init__(self):
        self.values = {}

    def __contains__(self, name):
        return name in self.values

    def __getitem__(self, name):
        assert isinstance(name, str)
        return self.values[name]

    def __len__(self):
        return len(self.values)

    def bind(self, name: str, value: int):
        """ Bind name to value, overwriting any earlier binding """
        assert isinstance(value, int)
        self.values[name] = value

    def __repr__(self):
        return 'BindingTable with {} bindings'.format(len(self.values))
