"""
Settings modules shipped with django-grido.
"""
