"""
Service layer.

Services hold the application's state and business rules.  Endpoints
call into them and translate the outcome into HTTP responses.
"""
