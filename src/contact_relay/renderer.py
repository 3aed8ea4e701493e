"""Fixed-format rendering of a submission into an email."""

from markupsafe import escape

from .models import RenderedMessage, Submission

SUBJECT_PREFIX = "[Formation SST] Demande de devis – "

TEXT_TEMPLATE = "Nom : {name}\nEmail : {email}\n\nMessage :\n{message}"

HTML_TEMPLATE = (
    "<p><strong>Nom :</strong> {name}</p>"
    "<p><strong>Email :</strong> {email}</p>"
    "<p><strong>Message :</strong></p>"
    "<p>{message}</p>"
)


def escape_html(value) -> str:
    """Escape ``& < > " '`` for safe embedding in HTML."""
    return str(escape(str(value)))


def render_subject(submission: Submission) -> str:
    return SUBJECT_PREFIX + submission.name


def render_text(submission: Submission) -> str:
    return TEXT_TEMPLATE.format(
        name=submission.name, email=submission.email, message=submission.message
    )


def render_html(submission: Submission) -> str:
    # Newlines become <br> only after escaping, so the tag itself survives.
    message = escape_html(submission.message).replace("\n", "<br>")
    return HTML_TEMPLATE.format(
        name=escape_html(submission.name),
        email=escape_html(submission.email),
        message=message,
    )


def render_message(submission: Submission) -> RenderedMessage:
    """Build subject, text and HTML renditions of a submission.

    Args:
        submission: Validated submission

    Returns:
        Rendered message ready for dispatch
    """
    return RenderedMessage(
        subject=render_subject(submission),
        text_body=render_text(submission),
        html_body=render_html(submission),
    )
