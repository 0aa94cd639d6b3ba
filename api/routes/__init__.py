"""API routes package"""

from . import members, trainers, plans, payments, check_ins, sessions, health

__all__ = ["members", "trainers", "plans", "payments", "check_ins", "sessions", "health"]
