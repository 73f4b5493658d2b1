"""
Use Cases

Organized into domain folders:
- auth/: Login, signup, activation and password reset flows
- site/: Static pages and contact form
- admin/: Site settings

Import from subdirectories.
"""
