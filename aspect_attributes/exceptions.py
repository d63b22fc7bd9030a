class AttributeException(Exception):
    pass


class InvalidArgument(AttributeException, TypeError, ValueError):
    pass


class UnknownAttribute(AttributeException, AttributeError):
    def __init__(self, name: str, owner: type = None):
        owner_name = owner.__name__ if owner is not None else "object"
        super().__init__(f"'{owner_name}' object has no setter for attribute '{name}'")
        self.name = name
        self.owner = owner
