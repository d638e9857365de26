"""HTTP implementations of the RESTGetter interface."""
