"""Resend email adapter."""

from .client import MockInvitationMailer, ResendInvitationMailer

__all__ = ["MockInvitationMailer", "ResendInvitationMailer"]
