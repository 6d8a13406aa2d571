"""
Object storage systems and the bucket client built on them.
"""
