"""
Analytics models for ClosetStats v1
"""
