"""
Storage Module - In-memory storage engine for users, portfolios and contact messages
State lives only as long as the process; nothing is written to disk.
"""

import threading
from datetime import datetime, timezone

from models import User, Portfolio, ContactMessage


class MemStorage:
    """
    Three independent collections keyed by integer id.

    Each collection has its own counter starting at 1. Counters only ever
    increase, so an id is never handed out twice. Id assignment and insert
    happen under one lock so concurrent requests cannot race on a counter.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users = {}
        self._portfolios = {}
        self._contact_messages = {}
        self._next_user_id = 1
        self._next_portfolio_id = 1
        self._next_contact_id = 1

    def init_app(self, app):
        """Attach this storage instance to a Flask app"""
        app.extensions['storage'] = self

    # User methods

    def create_user(self, insert):
        """Store a user. Username uniqueness is not enforced here."""
        with self._lock:
            user = User(id=self._next_user_id, username=insert.username, password=insert.password)
            self._users[user.id] = user
            self._next_user_id += 1
        return user

    def get_user(self, user_id):
        return self._users.get(user_id)

    def get_user_by_username(self, username):
        with self._lock:
            users = list(self._users.values())
        return next((u for u in users if u.username == username), None)

    # Portfolio methods

    def save_portfolio(self, data):
        """
        Store already-validated PortfolioData under the next portfolio id

        Args:
            data (PortfolioData): Payload returned by validate_portfolio

        Returns:
            Portfolio: The stored record
        """
        with self._lock:
            portfolio = Portfolio(id=self._next_portfolio_id, user_id=None, data=data)
            self._portfolios[portfolio.id] = portfolio
            self._next_portfolio_id += 1
        return portfolio

    def get_portfolio(self, portfolio_id):
        return self._portfolios.get(portfolio_id)

    # Contact message methods

    def save_contact_message(self, data, portfolio_id):
        """
        Store a validated ContactForm against a portfolio id

        The portfolio id is stored as given; whether it must resolve to a
        saved portfolio is decided by the caller.
        """
        with self._lock:
            contact_message = ContactMessage(
                id=self._next_contact_id,
                portfolio_id=portfolio_id,
                name=data.name,
                email=data.email,
                message=data.message,
                created_at=datetime.now(timezone.utc).isoformat()
            )
            self._contact_messages[contact_message.id] = contact_message
            self._next_contact_id += 1
        return contact_message

    def get_contact_message(self, contact_id):
        return self._contact_messages.get(contact_id)

    def get_contact_messages(self, portfolio_id):
        """All messages sent to a portfolio, oldest first"""
        with self._lock:
            messages = list(self._contact_messages.values())
        return [m for m in messages if m.portfolio_id == portfolio_id]
