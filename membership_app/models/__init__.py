"""Convenience exports for the models package."""

from .membership import Membership, UserMembership
from .enums import PaymentStatus
from .registration import Registration, RegistrationType
from .registration_category import RegistrationCategory
from .season import Season
from .user import User
from .user_registration import UserRegistration
