"""
SubnetKit - IP Address and Subnet Utilities

A small toolkit for network engineers: IPv4/IPv6 validation, address
classification, representation conversion and CIDR subnet arithmetic.
"""

__version__ = "0.1.0"
