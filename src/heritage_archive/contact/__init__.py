"""
Heritage Archive Contact Module.

Validates public contact-form inquiries and delivers them by email.
"""

__all__ = ["ContactInquiry", "ContactMailer", "contains_spam"]

from heritage_archive.contact.mailer import ContactMailer
from heritage_archive.contact.models import ContactInquiry, contains_spam
