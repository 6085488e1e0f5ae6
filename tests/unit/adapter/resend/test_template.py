"""Tests for invitation email content."""

from duo.adapter.resend.template import (
    FALLBACK_INVITER_NAME,
    invitation_subject,
    render_invitation_html,
)


class TestInvitationEmail:
    """Tests for subject and body rendering."""

    def test_subject_names_inviter(self):
        assert invitation_subject("Alice") == "Alice invited you to Couple's Calendar"

    def test_subject_falls_back(self):
        assert invitation_subject("").startswith(FALLBACK_INVITER_NAME)

    def test_body_has_link_and_expiry(self):
        html = render_invitation_html(
            "Alice", "https://duo.app/accept-invitation?token=abc", 7
        )

        assert 'href="https://duo.app/accept-invitation?token=abc"' in html
        assert "<strong>Alice</strong>" in html
        assert "expire in 7 days" in html

    def test_body_escapes_inviter_name(self):
        html = render_invitation_html("<script>x</script>", "https://duo.app", 7)

        assert "<script>" not in html
        assert "&lt;script&gt;" in html
