"""Input Adapters - presentation state, views and command line"""
