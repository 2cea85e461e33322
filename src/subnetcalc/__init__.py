"""
subnetcalc - IPv4/IPv6 Subnet Calculator

Computes network and broadcast addresses, host ranges, masks and address
counts from address/CIDR text, checks subnet membership, and lists the
subnets produced by narrowing a prefix.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "0.1.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"
