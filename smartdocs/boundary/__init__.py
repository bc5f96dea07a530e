"""
Infrastructure adapters.

Currently only blob storage (S3, local filesystem, in-memory), exposed
through the BlobAccessLayer protocol in boundary.storage.
"""
