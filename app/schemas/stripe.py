from pydantic import BaseModel


class PaymentIntent(BaseModel):
    id: str
    amount: int = 0
    currency: str | None = None
    status: str
    client_secret: str | None = None
    metadata: dict[str, str] = {}
