# Routes package init
"""
QuickBite Backend: API Routes Package
======================================

Route Inventory:
    - auth.py:    POST   /api/register
                  POST   /api/login
    - menu.py:    GET    /api/items
    - orders.py:  POST   /api/orders
                  GET    /api/orders/{user_id}
                  DELETE /api/orders/{order_id}
    - users.py:   PUT    /api/user/{user_id}/password
                  GET    /api/user/{user_id}
    - health.py:  GET    /health

Routes stay thin: pull values out of the request, call a service with the
injected data store, return the service's response model.
"""
