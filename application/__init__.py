"""Application Layer - ports, DTOs and use cases"""
