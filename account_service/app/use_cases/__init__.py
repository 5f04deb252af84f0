"""
Use Cases

Organized into domain folders:
- auth/: Sign-up, sign-in, password reset, withdrawal
- contacts/: Contact management and confirmation
- settings/: Account settings
- notifications/: Per-account notifications
"""
