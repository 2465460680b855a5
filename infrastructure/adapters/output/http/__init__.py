"""HTTP adapters (aiohttp)"""
