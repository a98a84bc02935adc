"""Use cases for support tickets."""

from .tickets import create_ticket, list_tickets, reply_ticket

__all__ = ["create_ticket", "list_tickets", "reply_ticket"]
