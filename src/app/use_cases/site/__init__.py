"""
Site Use Cases

Static pages and the contact form.
"""

from .contact_use_case import ContactUseCase
from .forms import ContactForm

__all__ = [
    "ContactUseCase",
    "ContactForm",
]
