"""
auth — User authentication module.

Provides:
  • Signed bearer token creation & verification
  • Password hashing (bcrypt, tunable work factor)
  • Register / Login / Dashboard API routes
  • ``require_claims`` FastAPI dependency
"""
