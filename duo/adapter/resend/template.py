"""Invitation email content."""

from html import escape

FALLBACK_INVITER_NAME = "Someone special"

_HTML = """\
<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <style>
      body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; color: #333; margin: 0; padding: 0; background-color: #f5f5f5; }}
      .container {{ max-width: 600px; margin: 40px auto; background: white; border-radius: 12px; overflow: hidden; }}
      .header {{ background: linear-gradient(135deg, #E91E63 0%, #9C27B0 100%); color: white; padding: 40px 30px; text-align: center; }}
      .content {{ padding: 40px 30px; }}
      .button {{ display: inline-block; background: #E91E63; color: white; padding: 16px 40px; text-decoration: none; border-radius: 8px; font-weight: bold; }}
      .link-box {{ background: #f9f9f9; padding: 16px; border-radius: 8px; margin: 24px 0; word-break: break-all; }}
      .footer {{ text-align: center; padding: 24px 30px; background: #f9f9f9; color: #666; font-size: 14px; }}
    </style>
  </head>
  <body>
    <div class="container">
      <div class="header"><h1>You're Invited!</h1></div>
      <div class="content">
        <p>Hi there!</p>
        <p><strong>{inviter}</strong> has invited you to join them on Couple's Calendar!</p>
        <p>Plan vacations, dates, trips, life events and shared goals together.</p>
        <p style="text-align: center; margin: 32px 0;">
          <a href="{link}" class="button">Accept Invitation</a>
        </p>
        <div class="link-box">
          <p>Or copy and paste this link into your browser:</p>
          <a href="{link}">{link}</a>
        </div>
        <p style="font-size: 14px; color: #666;">This invitation will expire in {expiry_days} days.</p>
      </div>
      <div class="footer">
        <p>If you didn't expect this invitation, you can safely ignore this email.</p>
      </div>
    </div>
  </body>
</html>
"""


def invitation_subject(inviter_display_name: str) -> str:
    name = inviter_display_name or FALLBACK_INVITER_NAME
    return f"{name} invited you to Couple's Calendar"


def render_invitation_html(
    inviter_display_name: str, invitation_link: str, expiry_days: int
) -> str:
    """Render the invitation email body.

    Args:
        inviter_display_name: Name of the inviting user
        invitation_link: Link carrying the invitation token
        expiry_days: Days until the invitation expires

    Returns:
        HTML document
    """
    return _HTML.format(
        inviter=escape(inviter_display_name or FALLBACK_INVITER_NAME),
        link=escape(invitation_link, quote=True),
        expiry_days=expiry_days,
    )
