"""
Share controller: admits recipients and maps dispatch calls to HTTP responses.
"""

import logging
from typing import List, Optional

from fastapi.responses import JSONResponse

from meeting_summarizer.dispatcher import Dispatcher
from meeting_summarizer.errors import DispatchError, ValidationError
from meeting_summarizer.recipients import admit_recipients

logger = logging.getLogger(__name__)


async def share_summary(
    dispatcher: Optional[Dispatcher],
    recipients: Optional[List[str]],
    subject: Optional[str],
    summary: Optional[str],
    sender_name: Optional[str] = None,
):
    """Send a summary by email and return the API response body."""
    admission = admit_recipients(recipients)
    if admission.rejected:
        logger.info(f"Ignoring {len(admission.rejected)} invalid recipient address(es)")

    try:
        if dispatcher is None:
            if not admission.admitted or not summary or not summary.strip():
                raise ValidationError("recipients and summary required")
            raise DispatchError(
                "Failed to share summary",
                details="Email transport is not configured (EMAIL_USER/EMAIL_PASS missing)",
            )

        result = await dispatcher.share(admission.admitted, subject, summary, sender_name)
        return {
            "success": True,
            "message": result.message,
            "recipients": result.recipients,
        }

    except ValidationError as e:
        logger.warning(f"Rejected share request: {e.message}")
        return JSONResponse(
            status_code=400, content={"error": "Recipients and summary are required"}
        )
    except DispatchError as e:
        logger.error(f"Error sharing summary: {e.details}")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to share summary", "details": e.details},
        )
