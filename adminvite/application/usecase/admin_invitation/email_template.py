"""Invitation email template."""

from datetime import datetime
from html import escape

INVITATION_SUBJECT = "Admin account invitation"


def render_invitation_email(verification_link: str, expires_at: datetime) -> str:
    """Render the HTML body of an invitation email.

    Args:
        verification_link: Link that completes signup
        expires_at: When the link stops working

    Returns:
        HTML email body
    """
    link = escape(verification_link, quote=True)
    expiry = expires_at.strftime("%Y-%m-%d %H:%M %Z")

    return f"""<!DOCTYPE html>
<html>
  <body style="font-family: sans-serif; line-height: 1.5; color: #222;">
    <p>You have been invited to create an admin account.</p>
    <p>
      Click the link below to complete your registration.
      This link is valid until {escape(expiry)}.
    </p>
    <p><a href="{link}">{link}</a></p>
    <p style="color: #666; font-size: 0.9em;">
      If you were not expecting this invitation, you can ignore this email.
    </p>
  </body>
</html>
"""
