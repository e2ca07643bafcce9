from .overview import overview_section
from .transactions import csv_import_section, transactions_section
from .budgets import budgets_section, budgets_crud_section
from .recurring_bills import bills_sort_control, recurring_bills_section
