"""
Infrastructure Layer - Clean Architecture
Concrete adapters: HTTP transport, weather API clients, repository, presentation
"""
