# Services package init
"""
Travel Diary Backend — Services Layer
======================================

What:  Data-access layer sitting between routes (HTTP) and the database.
How:   Services receive an AsyncSession per call, run one statement (two
       lookups plus an insert for diary entries), and return Pydantic
       response schemas.

Service Inventory:
    - UserService:      list / get by id / create users
    - LocationService:  list / create locations
    - EntryService:     list entries, create after author + location check

Each module exposes a stateless singleton (`user_service`, ...) used by the
routers and patched in tests.
"""
