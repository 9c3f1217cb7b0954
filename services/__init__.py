"""
Services package for CleanCity
"""
