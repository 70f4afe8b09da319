"""companykit - companies (tenants), employees, roles and invitations.

Multi-tenancy building blocks for applications where users own companies
and work for other users' companies under a role.
"""

__version__ = "0.1.0"
