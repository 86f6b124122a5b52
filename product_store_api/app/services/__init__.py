"""
Service layer abstraction.

Services encapsulate business logic.  ``ProductStore`` owns the
validation rules and the in‑memory product map, so API handlers only
translate between HTTP and the store.
"""
