"""
Client Profiles module.

Scope:
- Read a profile (public projection only, Token withheld)
- Partial update of Name/Email
- Delete

Profiles are never created through the API; they come from the seed set.
"""
