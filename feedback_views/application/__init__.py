"""
Application layer.

Page coordinators that wire fetched API records through the core
derivation logic and hand the results to the view.
"""
