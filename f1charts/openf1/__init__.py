"""
OpenF1 REST access: query rendering, the async client and one fetcher per
resource path.
"""
