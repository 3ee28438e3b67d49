"""Domain errors raised by the billing services.

Each error carries a stable ``code`` and the HTTP status the API layer
answers with. ``main`` registers a single handler for ``BillingError``.
"""


class BillingError(Exception):
    code = "BILLING_ERROR"
    status_code = 400

    def __init__(self, message: str, details=None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict:
        payload = {"error": self.message, "code": self.code}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ConfigurationError(BillingError):
    code = "CONFIGURATION_INVALID"
    status_code = 400


class TimbradoInvalidError(BillingError):
    code = "TIMBRADO_INVALID"
    status_code = 403

    def __init__(self, verdict) -> None:
        super().__init__(
            "Billing blocked: renew timbrado",
            details=verdict.error_message,
        )
        self.verdict = verdict

    def to_payload(self) -> dict:
        payload = super().to_payload()
        payload["days_left"] = self.verdict.days_left
        return payload


class EmptyCartError(BillingError):
    code = "EMPTY_CART"
    status_code = 400

    def __init__(self) -> None:
        super().__init__("Cart is empty")


class SaleValidationError(BillingError):
    code = "VALIDATION_FAILED"
    status_code = 400


class PersistenceFailedError(BillingError):
    code = "PERSISTENCE_FAILED"
    status_code = 503


class InvoiceSequenceExhaustedError(BillingError):
    code = "INVOICE_SEQUENCE_EXHAUSTED"
    status_code = 500
