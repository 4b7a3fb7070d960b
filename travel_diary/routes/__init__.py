# Routes package init
"""
Travel Diary Backend — API Routes Package
==========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - home.py:       GET  /                 (HTML landing page)
    - users.py:      GET  /users
                     GET  /users/{id}
                     POST /users
    - entries.py:    GET  /entries
                     POST /diaryentries
    - locations.py:  GET  /locations
                     POST /locations
    - health.py:     GET  /health

Routes are thin: they extract data from the request, call a service, and
return the service's schema object. Status codes for errors come from the
exception handlers in main.py.
"""
