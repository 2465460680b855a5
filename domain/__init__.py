"""Domain Layer - entities, repository interfaces, exceptions and constants"""
