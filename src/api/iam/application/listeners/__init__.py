"""Event listeners reacting to IAM domain events."""

from iam.application.listeners.welcome_email import WelcomeEmailListener

__all__ = ["WelcomeEmailListener"]
