import logging
from urllib.parse import quote

import httpx

from app.exceptions.custom import StripeError
from app.schemas.stripe import PaymentIntent

logger = logging.getLogger(__name__)

PAYMENT_INTENTS_URL = "https://api.stripe.com/v1/payment_intents"


class StripeService:
    """Thin client for the Stripe PaymentIntents API (form-encoded requests)."""

    def __init__(self, client: httpx.AsyncClient, api_key: str):
        self._client = client
        self._headers = {"Authorization": f"Bearer {api_key}"}

    async def create_payment_intent(
        self,
        amount: int,
        currency: str,
        metadata: dict[str, str] | None = None,
    ) -> PaymentIntent:
        data = {"amount": str(amount), "currency": currency}
        for key, value in (metadata or {}).items():
            data[f"metadata[{key}]"] = value

        try:
            resp = await self._client.post(
                PAYMENT_INTENTS_URL, data=data, headers=self._headers
            )
        except httpx.HTTPError as exc:
            raise StripeError(f"Request to Stripe failed: {exc}") from exc

        self._raise_for_status(resp)
        intent = PaymentIntent(**resp.json())
        logger.info(
            "Created payment intent %s for %d %s", intent.id, amount, currency
        )
        return intent

    async def retrieve_payment_intent(self, payment_intent_id: str) -> PaymentIntent:
        url = f"{PAYMENT_INTENTS_URL}/{quote(payment_intent_id, safe='')}"
        try:
            resp = await self._client.get(url, headers=self._headers)
        except httpx.HTTPError as exc:
            raise StripeError(f"Request to Stripe failed: {exc}") from exc

        self._raise_for_status(resp)
        return PaymentIntent(**resp.json())

    @staticmethod
    def _raise_for_status(resp: httpx.Response) -> None:
        if resp.status_code < 400:
            return
        message = resp.text
        try:
            message = resp.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            pass
        raise StripeError(message, status_code=resp.status_code)
