"""
API routers for AssetScan Engine
"""
