"""
AssetScan classification engine
Classifies OCR text into asset/system types and matching equipment records
"""

__version__ = "1.0.0"
