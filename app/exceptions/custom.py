class StripeError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class BookingRejectedError(Exception):
    """A booking request failed one of its preconditions (bad intent, mismatch, duplicate)."""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class HotelNotFoundError(Exception):
    def __init__(self, hotel_id: str, status_code: int = 404):
        self.hotel_id = hotel_id
        self.message = "Hotel not found"
        self.status_code = status_code
        super().__init__(f"Hotel not found: {hotel_id}")


class AuthenticationError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)



class PaymentIntentError(Exception):
    """Stripe accepted the request but the intent is unusable (e.g. no client secret)."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class UserNotFoundError(Exception):
    def __init__(self, user_id: str, status_code: int = 400):
        self.user_id = user_id
        self.message = "User not found"
        self.status_code = status_code
        super().__init__(f"User not found: {user_id}")
