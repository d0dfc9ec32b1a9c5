"""
ProfileHub.

Backend service for managing profiles (contact-like records) together with
their attached documents, ad-hoc custom fields and a handful of global settings.
"""

__version__ = "1.0.0"
