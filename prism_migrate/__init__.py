"""
prism-migrate: AWS account onboarding code generator.

Reads account and VPC metadata from the Prism inventory service and renders
ready-to-paste TypeScript configuration modules for the account setup tool.

Main features:
- Primary VPC selection (non-default VPC with three public and three private subnets)
- Jinja2-based module rendering with overridable templates
- Live Prism inventory or offline snapshot files
"""

__version__ = "0.1.0"
