"""
Use Cases

Organized into domain folders:
- membership/: Membership resolver views
- tenants/: Tenant, member and invitation management
- resources/: Policy-enforced CRUD on tenant-scoped tables
- flags/: Feature flag evaluation and administration
- admin/: Operator actions on tenants and platform roles

Import from subdirectories.
"""
