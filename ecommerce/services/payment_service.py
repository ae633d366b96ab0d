import braintree
from braintree.exceptions.braintree_error import BraintreeError
import logging
from decimal import Decimal
from flask import current_app
from ecommerce.exceptions import PaymentError, GatewayUnavailableError

logger = logging.getLogger(__name__)


class PaymentService:
    """Thin wrapper over the Braintree SDK.

    Card data is collected by Braintree hosted fields in the browser; the
    server only ever sees the client token it hands out and the payment
    method nonce the browser sends back.
    """

    @staticmethod
    def get_gateway() -> braintree.BraintreeGateway:
        config = current_app.config
        return braintree.BraintreeGateway(
            braintree.Configuration(
                environment=braintree.Environment.parse_environment(
                    config["BRAINTREE_ENVIRONMENT"]
                ),
                merchant_id=config["BRAINTREE_MERCHANT_ID"],
                public_key=config["BRAINTREE_PUBLIC_KEY"],
                private_key=config["BRAINTREE_PRIVATE_KEY"],
            )
        )

    @staticmethod
    def generate_client_token() -> str:
        try:
            return PaymentService.get_gateway().client_token.generate()
        except BraintreeError as e:
            logger.error(f"Failed to generate client token: {e}", exc_info=True)
            raise GatewayUnavailableError("Payment gateway unavailable") from e

    @staticmethod
    def charge(amount: Decimal, nonce: str) -> dict:
        """Submit a sale for settlement and return the recorded payment result"""
        try:
            result = PaymentService.get_gateway().transaction.sale({
                "amount": f"{amount:.2f}",
                "payment_method_nonce": nonce,
                "options": {"submit_for_settlement": True},
            })
        except BraintreeError as e:
            logger.error(f"Braintree sale failed: {e}", exc_info=True)
            raise GatewayUnavailableError("Payment gateway unavailable") from e

        if not result.is_success:
            logger.info(f"Braintree sale declined: {result.message}")
            raise PaymentError(result.message)

        transaction = result.transaction
        logger.info(f"Braintree sale {transaction.id} settled for {amount:.2f}")
        return {
            "success": True,
            "transaction_id": transaction.id,
            "status": transaction.status,
            "amount": str(transaction.amount),
        }

    @staticmethod
    def void(transaction_id: str) -> bool:
        """Cancel a sale that has not settled yet; returns whether it was voided"""
        try:
            result = PaymentService.get_gateway().transaction.void(transaction_id)
        except BraintreeError as e:
            logger.error(f"Braintree void of {transaction_id} failed: {e}", exc_info=True)
            return False

        if not result.is_success:
            logger.error(f"Braintree void of {transaction_id} refused: {result.message}")
        return result.is_success
