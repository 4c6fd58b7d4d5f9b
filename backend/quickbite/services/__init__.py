# Services package init
"""
QuickBite Backend: Services Layer
==================================

What:  Business logic between routes (HTTP) and the data store (persistence).
How:   Stateless singletons. Every method receives the `DataStore` to use
       as its first argument, so a test can pass any implementation.

Service Inventory:
    - AuthService:  register, login, change password
    - OrderService: create, list by owner, delete by id
    - MenuService:  list menu items
    - UserService:  public user lookup
"""
