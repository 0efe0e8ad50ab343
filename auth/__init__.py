"""
auth: user authentication module.

Provides:
  • Sign-up input validation
  • Password hashing (bcrypt)
  • JWT signing & verification, delivered as an HttpOnly cookie
  • Sign-up / sign-in / sign-out API routes
"""
