"""
Page renderers for CleanCity
Each module exposes render(state)
"""
