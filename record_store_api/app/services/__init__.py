"""
Service layer.

Each service receives its repositories at construction time and owns
the rules that span more than one field or record: reference
resolution, date ordering, author linking and mapping store failures
onto API errors.  Handlers only translate HTTP to service calls.
"""
