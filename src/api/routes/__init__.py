"""API routers for ShopList."""
