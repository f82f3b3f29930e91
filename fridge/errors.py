class FridgeError(Exception):
    """Base class for errors raised by the inventory and catalog sources."""


class Unauthorized(FridgeError):
    pass


class ServiceError(FridgeError):
    pass
