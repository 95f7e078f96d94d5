"""intdash measurement webhook Lambda"""
