"""
Services package — orchestration between the API layer and repositories.

Services own the ownership checks and run the validation package before
anything is written. They raise `tabula.services.errors` exceptions,
which the API layer maps to client-facing payloads.
"""
