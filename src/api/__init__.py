"""FastAPI application module for ShopList.

This module contains the FastAPI application, route handlers, and API
endpoints for the shopping-list service. It translates HTTP requests into
repository and service calls and serializes the results as JSON.
"""
