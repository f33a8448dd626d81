"""Integration adapters for accounting backends.

Keep these modules small and testable:
- No knowledge of services or the client facade
- Wire schemas and transport stay inside their provider package
- Only the adapter maps wire shapes to the neutral model
"""
