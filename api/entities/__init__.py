"""
Entity-type catalog: read-only listing of active entity types.
"""
