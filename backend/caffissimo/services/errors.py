"""
Domain errors raised by the services. Routers translate them to HTTP status codes.
"""


class PermissionDeniedError(Exception):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Permission required: {key}")


class OrderNotFoundError(LookupError):
    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order {order_id} not found")


class InvalidStatusTransitionError(ValueError):
    pass


class OrderCancellationError(ValueError):
    pass


class FridgeReportError(ValueError):
    pass


class ExternalSalesImportError(ValueError):
    pass
