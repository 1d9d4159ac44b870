"""
Service functions for the token, marketplace, coin, store and faucet demos.
"""
