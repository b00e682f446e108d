"""
Wardrobe data loading and console reporting for ClosetStats v1
"""
