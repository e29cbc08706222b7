import structlog

from portfolio import utils
from portfolio.core.core import Service
from portfolio.core.modules.contact.models import ContactMessage

logger = structlog.get_logger(__name__)


class ContactService(Service):
    """Accepts contact form messages. They are logged, not stored or delivered."""

    def submit(self, message: ContactMessage) -> None:
        logger.info(
            "contact_message_received",
            name=message.name,
            email=message.email,
            subject=message.subject,
            message=message.message,
            received_at=utils.now().isoformat(),
        )
