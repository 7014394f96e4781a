"""
Use Cases

Organized into domain folders:
- auth/: Sign-up, sign-in, sign-out
- tenants/: Gym selection, invitations, onboarding, staff
- users/: Current user context
"""
