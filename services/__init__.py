"""
Service layer for AWS operations.

This module provides abstraction over AWS services, one class per
service, composed by AWSWrapper.
"""
