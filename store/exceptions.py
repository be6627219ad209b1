class StoreError(Exception):
    """Base class for errors the storefront reports back to the shopper."""


class VoucherError(StoreError):
    pass


class LoginError(StoreError):
    pass
