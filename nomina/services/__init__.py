# Services package.
#
# Each module exposes one service class holding the validation and
# ownership-chain logic for a single entity of the hierarchy:
#
#   organization_service  root tenants
#   payroll_service       payrolls of an organization
#   division_service      division tree of a payroll
#   job_service           jobs of a payroll
#   bank_service          banks of an organization
#   employee_service      employees of a division (checks job and bank too)
#
# Every service receives its repository (see ``nomina.repositories.protocols``)
# and the sibling services it depends on through its constructor.  Services
# never commit; the caller owns the transaction (``get_db`` in the router
# layer).
