"""
AssetScan engine test suite
"""
