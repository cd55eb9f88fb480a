"""Standard chart of accounts and classification rule tables.

Both tables are plain data. Rule order matters only between rules of equal
priority: the catalog keeps table order for those (see RuleCatalog).
"""

from autoledger.domain.entities import MatchType
from autoledger.domain.rule_catalog import RuleDefinition


# Priority tiers, highest evaluated first
PRIORITY_HIGHEST = 20
PRIORITY_CRITICAL = 10
PRIORITY_HIGH = 9
PRIORITY_STANDARD = 8
PRIORITY_FALLBACK = 7
PRIORITY_LOW = 6
PRIORITY_GENERIC = 5

CAT_CURRENT_ASSETS = "Current Assets"
CAT_NON_CURRENT_ASSETS = "Non-Current Assets"
CAT_CURRENT_LIABILITIES = "Current Liabilities"
CAT_NON_CURRENT_LIABILITIES = "Non-Current Liabilities"
CAT_EQUITY = "Owner's Equity"
CAT_OPERATING_REVENUE = "Operating Revenue"
CAT_OTHER_INCOME = "Other Income"
CAT_OPERATING_EXPENSES = "Operating Expenses"
CAT_ADMINISTRATIVE_EXPENSES = "Administrative Expenses"
CAT_FINANCE_COSTS = "Finance Costs"


# (code, name, category, description)
STANDARD_ACCOUNTS = (
    ("1000", "Petty Cash", CAT_CURRENT_ASSETS, "Cash on hand for small expenses"),
    ("1000-001", "Loan Receivable - Tau", CAT_CURRENT_ASSETS, "Loan receivable from Tau"),
    ("1000-002", "Loan Receivable - Maposa", CAT_CURRENT_ASSETS, "Loan receivable from Maposa"),
    ("1000-003", "Loan Receivable - Other", CAT_CURRENT_ASSETS, "Other loan receivables"),
    ("1100", "Bank - Current Account", CAT_CURRENT_ASSETS, "Primary business current account"),
    ("1100-001", "Bank Transfers", CAT_CURRENT_ASSETS, "Internal bank transfers"),
    ("1101", "Bank - Savings Account", CAT_CURRENT_ASSETS, "Business savings account"),
    ("1102", "Bank - Foreign Currency", CAT_CURRENT_ASSETS, "Foreign currency accounts"),
    ("1200", "Accounts Receivable", CAT_CURRENT_ASSETS, "Money owed by customers"),
    ("1300", "Inventory", CAT_CURRENT_ASSETS, "Stock and inventory items"),
    ("1400", "Prepaid Expenses", CAT_CURRENT_ASSETS, "Expenses paid in advance"),
    ("1500", "VAT Input", CAT_CURRENT_ASSETS, "VAT paid on purchases"),
    ("2000", "Property, Plant & Equipment", CAT_NON_CURRENT_ASSETS, "Fixed assets at cost"),
    ("2000-001", "Director Loan - Company Assist", CAT_NON_CURRENT_ASSETS, "Loan from director for company assistance"),
    ("2100", "Accumulated Depreciation", CAT_NON_CURRENT_ASSETS, "Depreciation of fixed assets"),
    ("2200", "Investments", CAT_NON_CURRENT_ASSETS, "Long-term investments"),
    ("2300", "Motor Vehicles", CAT_NON_CURRENT_ASSETS, "Motor vehicles and transport equipment"),
    ("2400", "Furniture & Fixtures", CAT_NON_CURRENT_ASSETS, "Furniture and fixtures"),
    ("2500", "Office Equipment", CAT_NON_CURRENT_ASSETS, "Office equipment"),
    ("2600", "Computer Software", CAT_NON_CURRENT_ASSETS, "Computer software"),
    ("2700", "Office Supplies", CAT_NON_CURRENT_ASSETS, "Office supplies"),
    ("3000", "Accounts Payable", CAT_CURRENT_LIABILITIES, "Money owed to suppliers"),
    ("3100", "VAT Output", CAT_CURRENT_LIABILITIES, "VAT collected on sales"),
    ("3200", "PAYE Payable", CAT_CURRENT_LIABILITIES, "Pay-As-You-Earn tax payable"),
    ("3300", "UIF Payable", CAT_CURRENT_LIABILITIES, "Unemployment Insurance Fund payable"),
    ("3400", "SDL Payable", CAT_CURRENT_LIABILITIES, "Skills Development Levy payable"),
    ("3500", "Accrued Expenses", CAT_CURRENT_LIABILITIES, "Expenses incurred but not yet paid"),
    ("4000", "Long-term Loans", CAT_NON_CURRENT_LIABILITIES, "Long-term debt obligations"),
    ("5000", "Share Capital", CAT_EQUITY, "Issued share capital"),
    ("5100", "Retained Earnings", CAT_EQUITY, "Accumulated profits"),
    ("5200", "Current Year Earnings", CAT_EQUITY, "Current year profit/loss"),
    ("5300", "Opening Balance Equity", CAT_EQUITY, "Temporary equity account for opening balances - Cash Flow Statement only"),
    ("6000", "Sales Revenue", CAT_OPERATING_REVENUE, "Revenue from sales"),
    ("6100", "Service Revenue", CAT_OPERATING_REVENUE, "Revenue from services"),
    ("6100-001", "Corobrik Service Revenue", CAT_OPERATING_REVENUE, "Service revenue from Corobrik"),
    ("6200", "Other Operating Revenue", CAT_OPERATING_REVENUE, "Other operating income"),
    ("7000", "Interest Income", CAT_OTHER_INCOME, "Interest earned on investments"),
    ("7100", "Dividend Income", CAT_OTHER_INCOME, "Dividends received"),
    ("7200", "Gain on Asset Disposal", CAT_OTHER_INCOME, "Profit from asset sales"),
    ("8000", "Cost of Goods Sold", CAT_OPERATING_EXPENSES, "Direct costs of products sold"),
    ("8100", "Employee Costs", CAT_OPERATING_EXPENSES, "Salaries, wages and benefits"),
    ("8100-001", "Director Remuneration", CAT_OPERATING_EXPENSES, "Director remuneration"),
    ("8200", "Rent Expense", CAT_OPERATING_EXPENSES, "Office and facility rent"),
    ("8300", "Utilities", CAT_OPERATING_EXPENSES, "Electricity, water, gas"),
    ("8400", "Communication", CAT_OPERATING_EXPENSES, "Telephone, internet, postage"),
    ("8500", "Motor Vehicle Expenses", CAT_OPERATING_EXPENSES, "Vehicle running costs"),
    ("8500-001", "Cartrack Vehicle Tracking", CAT_OPERATING_EXPENSES, "Cartrack tracking service fees"),
    ("8500-002", "Netstar Vehicle Tracking", CAT_OPERATING_EXPENSES, "Netstar tracking service fees"),
    ("8600", "Travel & Entertainment", CAT_OPERATING_EXPENSES, "Business travel and entertainment"),
    ("8600-001", "Fuel Expenses - BP Stations", CAT_OPERATING_EXPENSES, "Fuel purchases at BP"),
    ("8600-002", "Fuel Expenses - Shell Stations", CAT_OPERATING_EXPENSES, "Fuel purchases at Shell"),
    ("8600-003", "Fuel Expenses - Sasol Stations", CAT_OPERATING_EXPENSES, "Fuel purchases at Sasol"),
    ("8600-004", "Engen Fuel Expenses", CAT_OPERATING_EXPENSES, "Fuel purchases at Engen"),
    ("8600-099", "Fuel Expenses - Other Stations", CAT_OPERATING_EXPENSES, "Fuel purchases at other stations"),
    ("8700", "Professional Services", CAT_OPERATING_EXPENSES, "Legal, accounting, consulting"),
    ("8710", "Suppliers Expense", CAT_OPERATING_EXPENSES, "Payments to suppliers and vendors"),
    ("8720", "HR Management Expense", CAT_OPERATING_EXPENSES, "Human resources management and recruitment"),
    ("8730", "Education & Training", CAT_OPERATING_EXPENSES, "Education fees and training costs"),
    ("8800", "Insurance", CAT_OPERATING_EXPENSES, "Business insurance premiums"),
    ("8800-001", "King Price Insurance Premiums", CAT_OPERATING_EXPENSES, "King Price insurance premiums"),
    ("8800-002", "DOTSURE Insurance Premiums", CAT_OPERATING_EXPENSES, "DOTSURE insurance premiums"),
    ("8800-003", "OUTSurance Insurance Premiums", CAT_OPERATING_EXPENSES, "OUTSurance insurance premiums"),
    ("8800-004", "MIWAY Insurance Premiums", CAT_OPERATING_EXPENSES, "MIWAY insurance premiums"),
    ("8800-005", "Liberty Insurance Premiums", CAT_OPERATING_EXPENSES, "Liberty insurance premiums"),
    ("8800-006", "Badger Insurance Premiums", CAT_OPERATING_EXPENSES, "Badger insurance premiums"),
    ("8800-999", "Other Insurance Premiums", CAT_OPERATING_EXPENSES, "Other insurance providers"),
    ("8900", "Repairs & Maintenance", CAT_OPERATING_EXPENSES, "Equipment and facility maintenance"),
    ("9000", "Office Supplies", CAT_ADMINISTRATIVE_EXPENSES, "Stationery and office materials"),
    ("9100", "Computer Expenses", CAT_ADMINISTRATIVE_EXPENSES, "Software licenses and IT costs"),
    ("9200", "Marketing & Advertising", CAT_ADMINISTRATIVE_EXPENSES, "Promotional and marketing costs"),
    ("9300", "Training & Development", CAT_ADMINISTRATIVE_EXPENSES, "Staff training and development"),
    ("9400", "Depreciation", CAT_ADMINISTRATIVE_EXPENSES, "Depreciation of fixed assets"),
    ("9500", "Interest Expense", CAT_FINANCE_COSTS, "Interest on loans and credit"),
    ("9600", "Bank Charges", CAT_FINANCE_COSTS, "Bank fees and transaction costs"),
    ("9700", "Foreign Exchange Loss", CAT_FINANCE_COSTS, "Loss on currency exchange"),
    ("9800", "VAT Payments to SARS", CAT_FINANCE_COSTS, "VAT payments made to South African Revenue Service"),
    ("9810", "Loan Repayments", CAT_FINANCE_COSTS, "Loan repayment costs"),
    ("9820", "PAYE Expense", CAT_FINANCE_COSTS, "PAYE tax payments to South African Revenue Service"),
    ("9900", "Pension Expenses", CAT_FINANCE_COSTS, "Pension-related costs"),
)


STANDARD_RULES = (
    # Named individuals and counterparties that must win over generic keywords
    RuleDefinition(
        "Insurance Chauke Salaries",
        MatchType.CONTAINS,
        "INSURANCE CHAUKE",
        "8100",
        PRIORITY_CRITICAL,
        "Salary payments to Insurance Chauke - prioritize over insurance pattern",
    ),
    RuleDefinition(
        "Jeffrey Maphosa Loan Repayment",
        MatchType.CONTAINS,
        "JEFFREY MAPHOSA LOAN",
        "4000",
        PRIORITY_CRITICAL,
        "Loan repayments from Jeffrey Maphosa to company loan assist account",
    ),
    RuleDefinition(
        "Stone Jeffrey Maphosa Reimbursement",
        MatchType.REGEX,
        "STONE JEFFR.*MAPHOSA.*(REIMBURSE|REPAYMENT)",
        "4000",
        PRIORITY_CRITICAL,
        "Director reimbursements for personal credit card expenses (Company Assist loan)",
    ),
    RuleDefinition(
        "Corobrik Service Revenue",
        MatchType.CONTAINS,
        "COROBRIK",
        "6100-001",
        PRIORITY_CRITICAL,
        "Credit Transfer ... Corobrik",
    ),
    RuleDefinition(
        "Immediate Payment - Jeffrey S Maphosa",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 224812909 JEFFREY S MAPHOSA",
        "8100-001",
        PRIORITY_CRITICAL,
        "Director remuneration payment to Jeffrey S Maphosa",
    ),
    RuleDefinition(
        "Immediate Payment - Katleho Mogaloa",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 226159243 KATLEHO MOGALOA",
        "8100",
        PRIORITY_CRITICAL,
        "Employee payment to Katleho Mogaloa",
    ),
    RuleDefinition(
        "Immediate Payment - Jordan Moyane",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 224812154 JORDAN MOYANE",
        "8100",
        PRIORITY_CRITICAL,
        "Employee payment to Jordan Moyane",
    ),
    RuleDefinition(
        "Immediate Payment - Sibongile Dlamini",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 224850901 SIBONGILE DLAMINI",
        "8100",
        PRIORITY_CRITICAL,
        "Employee payment to Sibongile Dlamini",
    ),
    RuleDefinition(
        "Immediate Payment - Mabunda IP",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 224855113 MABUNDA IP",
        "8100",
        PRIORITY_CRITICAL,
        "Employee payment to Mabunda IP",
    ),
    RuleDefinition(
        "Immediate Payment - Albert Zunga",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 221599858 ALBERT ZUNGA",
        "8100",
        PRIORITY_CRITICAL,
        "Employee payment to Albert Zunga",
    ),
    RuleDefinition(
        "Immediate Payment - Piet Mathebula",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 221514559 PIET MATHEBULA",
        "8100",
        PRIORITY_CRITICAL,
        "Employee payment to Piet Mathebula",
    ),
    RuleDefinition(
        "Immediate Payment - Alberake Protection",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 218989372 ALBERAKE PROTECTION",
        "8000",
        PRIORITY_CRITICAL,
        "Cost of goods sold - Alberake Protection",
    ),
    RuleDefinition(
        "Fee Immediate Payment",
        MatchType.CONTAINS,
        "FEE IMMEDIATE PAYMENT",
        "9600",
        PRIORITY_CRITICAL,
        "Bank charges for immediate payment processing",
    ),
    # High-confidence counterparties and payment channels
    RuleDefinition(
        "Returned Debit - DOTSURE",
        MatchType.CONTAINS,
        "RTD-DEBIT AGAINST PAYERS AUTH DOTSURE",
        "8800-002",
        PRIORITY_HIGH,
        "Returned debit for DOTSURE insurance payments",
    ),
    RuleDefinition(
        "Excess Interest Expense",
        MatchType.CONTAINS,
        "EXCESS INTEREST",
        "9500",
        PRIORITY_HIGH,
        "Excess interest charges on loans/accounts",
    ),
    RuleDefinition(
        "STD Bank Bond Repayment",
        MatchType.CONTAINS,
        "STD BANK BOND",
        "4000",
        PRIORITY_HIGH,
        "STD Bank bond/home loan repayments",
    ),
    RuleDefinition(
        "IB Transfer From Fuel Account",
        MatchType.CONTAINS,
        "IB TRANSFER FROM *****2689327",
        "8600-099",
        PRIORITY_HIGH,
        "Internal bank transfers from fuel supplier account",
    ),
    RuleDefinition(
        "Cartrack Vehicle Tracking",
        MatchType.CONTAINS,
        "CARTRACK",
        "8500-001",
        PRIORITY_HIGH,
        "Cartrack vehicle tracking service fees",
    ),
    RuleDefinition(
        "IB Instant Money Cash to Employees",
        MatchType.CONTAINS,
        "IB INSTANT MONEY CASH TO",
        "8100",
        PRIORITY_HIGH,
        "E-wallet payments directly to part-time employees",
    ),
    RuleDefinition(
        "Autobank Transfer to Fuel Account",
        MatchType.CONTAINS,
        "AUTOBANK TRANSFER TO ACCOUNT",
        "8600-099",
        PRIORITY_HIGH,
        "Automated bank transfers to fuel supplier accounts",
    ),
    RuleDefinition(
        "Immediate Payment - Generic Employee",
        MatchType.REGEX,
        r"IMMEDIATE PAYMENT \d+ [A-Z]+ [A-Z]+",
        "8100",
        PRIORITY_STANDARD,
        "Generic immediate payment to employees (name and surname pattern)",
    ),
    RuleDefinition(
        "Employee Payment - Sibongile Dlamini",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 167855420 SIBONGILE DLAMINI",
        "8100",
        PRIORITY_HIGH,
        "Employee payment to Sibongile Dlamini",
    ),
    RuleDefinition(
        "Employee Payment - Themba Mkhatshwa",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 207008710 THEMBA MKHATSHWA",
        "8100",
        PRIORITY_HIGH,
        "Employee payment to Themba Mkhatshwa",
    ),
    RuleDefinition(
        "Employee Payment - Lawrence Phogole",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 207008307 LAWRENCE PHOGOLE",
        "8100",
        PRIORITY_HIGH,
        "Employee payment to Lawrence Phogole",
    ),
    RuleDefinition(
        "Employee Payment - Tlometsane Moraswi",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 207009081 TLOMETSANE MORASWI",
        "8100",
        PRIORITY_HIGH,
        "Employee payment to Tlometsane Moraswi",
    ),
    RuleDefinition(
        "Employee Payment - Mbhoni Miyambo",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 204543849 MBHONI MIYAMBO",
        "8100",
        PRIORITY_HIGH,
        "Employee payment to Mbhoni Miyambo",
    ),
    RuleDefinition(
        "Employee Payment - Musa Nzunza",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 156658792 MUSA NZUNZA",
        "8100",
        PRIORITY_HIGH,
        "Employee payment to Musa Nzunza",
    ),
    RuleDefinition(
        "Employee Payment - Masemola Matawaneng",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 207009987 MASEMOLA MATAWANENG",
        "8100",
        PRIORITY_HIGH,
        "Employee payment to Masemola Matawaneng",
    ),
    RuleDefinition(
        "Employee Payment - Winners Chauke",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT 207010671 WINNERS CHAUKE",
        "8100",
        PRIORITY_HIGH,
        "Employee payment to Winners Chauke",
    ),
    RuleDefinition(
        "Medical Aid Contributions",
        MatchType.CONTAINS,
        "MEDICAL AID",
        "8900",
        PRIORITY_HIGH,
        "Medical aid scheme contributions for employees",
    ),
    RuleDefinition(
        "UIF Contributions",
        MatchType.CONTAINS,
        "UIF CONTRIBUTION",
        "9820",
        PRIORITY_HIGH,
        "Unemployment Insurance Fund contributions",
    ),
    RuleDefinition(
        "Provident Fund Contributions",
        MatchType.CONTAINS,
        "PROVIDENT FUND",
        "9900",
        PRIORITY_HIGH,
        "Provident fund retirement contributions",
    ),
    RuleDefinition(
        "Cellphone Expenses",
        MatchType.CONTAINS,
        "CELLPHONE",
        "8400",
        PRIORITY_HIGH,
        "Cellphone and mobile communication expenses",
    ),
    RuleDefinition(
        "Internet Expenses",
        MatchType.CONTAINS,
        "INTERNET",
        "8400",
        PRIORITY_HIGH,
        "Internet service provider expenses",
    ),
    RuleDefinition(
        "Director Payment - DB Nkuna",
        MatchType.CONTAINS,
        "DB NKUNA",
        "8100-001",
        PRIORITY_HIGH,
        "Director remuneration payment to DB Nkuna",
    ),
    RuleDefinition(
        "Pension Fund Contributions",
        MatchType.CONTAINS,
        "PENSION FUND CONTRIBUTION",
        "9900",
        PRIORITY_HIGH,
        "Pension fund contributions for employees",
    ),
    RuleDefinition(
        "Pension Fund Transfers",
        MatchType.CONTAINS,
        "DEBIT TRANSFER FAW",
        "9900",
        PRIORITY_HIGH,
        "Pension fund transfers and contributions",
    ),
    RuleDefinition(
        "OHS Training Expenses",
        MatchType.CONTAINS,
        "OHS TRAINING",
        "8730",
        PRIORITY_HIGH,
        "Occupational Health and Safety training expenses",
    ),
    RuleDefinition(
        "Petrol Allowance",
        MatchType.CONTAINS,
        "PETROL ALOWANCE",
        "8500",
        PRIORITY_HIGH,
        "Petrol allowance payments to employees",
    ),
    RuleDefinition(
        "PAYE Payments to SARS",
        MatchType.CONTAINS,
        "PAYE-PAY-AS-",
        "9820",
        PRIORITY_HIGH,
        "PAYE tax payments to South African Revenue Service",
    ),
    RuleDefinition(
        "Cash Withdrawals",
        MatchType.CONTAINS,
        "AUTOBANK CASH WITHDRAWAL",
        "8100",
        PRIORITY_HIGH,
        "ATM cash withdrawals",
    ),
    RuleDefinition(
        "Stokvela Payments",
        MatchType.CONTAINS,
        "STOKVELA",
        "1000",
        PRIORITY_HIGH,
        "Stokvela (savings club) payments",
    ),
    RuleDefinition(
        "Director Reimbursements",
        MatchType.CONTAINS,
        "REIMBURSE",
        "4000",
        PRIORITY_HIGH,
        "Director expense reimbursements",
    ),
    RuleDefinition(
        "Transport Expenses",
        MatchType.CONTAINS,
        "TRANSPORT",
        "8500",
        PRIORITY_HIGH,
        "Transport and related expenses",
    ),
    RuleDefinition(
        "Telephone Expenses",
        MatchType.CONTAINS,
        "TELEPHONE",
        "8400",
        PRIORITY_HIGH,
        "Telephone and communication expenses",
    ),
    RuleDefinition(
        "Netstar Vehicle Tracking",
        MatchType.CONTAINS,
        "NETSTAR",
        "8500-002",
        PRIORITY_HIGH,
        "Netstar vehicle tracking services",
    ),
    RuleDefinition(
        "Loan Income",
        MatchType.CONTAINS,
        "IB PAYMENT FROM",
        "2000-001",
        PRIORITY_HIGH,
        "Loans received from directors/associates",
    ),
    RuleDefinition(
        "Company Transfers - Company Assist",
        MatchType.REGEX,
        "CREDIT TRANSFER.*COMPANY ASSIST",
        "4000",
        PRIORITY_HIGH,
        "Inter-company transfers for company assistance (loans)",
    ),
    RuleDefinition(
        "Company Transfers - TAU",
        MatchType.REGEX,
        "CREDIT TRANSFER.*TAU",
        "1000-001",
        PRIORITY_HIGH,
        "Inter-company transfers for TAU (stokvela contributions)",
    ),
    RuleDefinition(
        "Returned Debits",
        MatchType.REGEX,
        "RTD-.*",
        "8800",
        PRIORITY_STANDARD,
        "Returned debit orders (offset original transactions)",
    ),
    RuleDefinition(
        "Balance Brought Forward",
        MatchType.CONTAINS,
        "BALANCE BROUGHT FORWARD",
        "5000",
        PRIORITY_HIGH,
        "Opening balance entries from previous periods",
    ),
    RuleDefinition(
        "SARS VAT Payments",
        MatchType.CONTAINS,
        "PAYMENT TO SARS-VAT",
        "9800",
        PRIORITY_HIGH,
        "VAT payments made to South African Revenue Service",
    ),
    RuleDefinition(
        "Global Hope Financia Accounting",
        MatchType.CONTAINS,
        "GLOBAL HOPE FINACIA",
        "8700",
        PRIORITY_HIGH,
        "Accounting services from Global Hope Financia",
    ),
    RuleDefinition(
        "Fuel Purchase - Account 2689327",
        MatchType.CONTAINS,
        "2689327",
        "8600-099",
        PRIORITY_HIGH,
        "Fuel purchases to supplier account 2689327",
    ),
    RuleDefinition(
        "IB Payment to EUPHODIA N TAU XINGHIZANA",
        MatchType.CONTAINS,
        "IB PAYMENT TO EUPHODIA N TAU XINGHIZANA",
        "1000-001",
        PRIORITY_HIGH,
        "IB payment to EUPHODIA N TAU XINGHIZANA (director/employee payment)",
    ),
    RuleDefinition(
        "IB Payment to NGWAKWANE E TAU XINGHIZANA",
        MatchType.CONTAINS,
        "IB PAYMENT TO NGWAKWANE E TAU XINGHIZANA",
        "1000-001",
        PRIORITY_HIGH,
        "IB payment to NGWAKWANE E TAU XINGHIZANA (director/employee payment)",
    ),
    RuleDefinition(
        "IB Payment to EUPHODIA TAU STOKFELA",
        MatchType.CONTAINS,
        "IB PAYMENT TO EUPHODIA TAU STOKFELA",
        "1000-001",
        PRIORITY_HIGH,
        "IB payment to EUPHODIA TAU STOKFELA (stokvela payment)",
    ),
    RuleDefinition(
        "Immediate Payment to JEFFREY MAPHOSA",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT TO JEFFREY MAPHOSA",
        "8100-001",
        PRIORITY_HIGH,
        "Immediate payment to JEFFREY MAPHOSA (employee payment)",
    ),
    RuleDefinition(
        "Immediate Payment to NGWAKWANE E TAU",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT TO NGWAKWANE E TAU",
        "1000-001",
        PRIORITY_HIGH,
        "Immediate payment to NGWAKWANE E TAU (employee payment)",
    ),
    RuleDefinition(
        "Immediate Payment to DAVID MOLEFE",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT TO DAVID MOLEFE",
        "8100",
        PRIORITY_HIGH,
        "Immediate payment to DAVID MOLEFE (employee payment)",
    ),
    RuleDefinition(
        "Immediate Payment to MUZIKAYISE ZUNGA",
        MatchType.CONTAINS,
        "IMMEDIATE PAYMENT TO MUZIKAYISE ZUNGA",
        "8100",
        PRIORITY_HIGH,
        "Immediate payment to MUZIKAYISE ZUNGA (employee payment)",
    ),
    # Generic payment shapes
    RuleDefinition(
        "IB Payment To - Generic",
        MatchType.REGEX,
        "IB PAYMENT TO [A-Z]+ [A-Z]+.*",
        "8100",
        PRIORITY_STANDARD,
        "Generic IB payment to individuals (fallback rule)",
    ),
    RuleDefinition(
        "Immediate Payment - Generic",
        MatchType.REGEX,
        "IMMEDIATE PAYMENT [0-9]+ [A-Z]+ [A-Z]+.*",
        "8100",
        PRIORITY_STANDARD,
        "Generic immediate payment to individuals",
    ),
    RuleDefinition(
        "Autobank Cash Deposit - Generic",
        MatchType.CONTAINS,
        "AUTOBANK CASH DEPOSIT",
        "1000",
        PRIORITY_FALLBACK,
        "Cash deposits through autobank (revenue)",
    ),
    RuleDefinition(
        "Bank Transfers - IB TRANSFER TO",
        MatchType.CONTAINS,
        "IB TRANSFER TO",
        "1100-001",
        PRIORITY_FALLBACK,
        "Internal bank transfers to other accounts",
    ),
    RuleDefinition(
        "Bank Transfers - IB TRANSFER FROM",
        MatchType.CONTAINS,
        "IB TRANSFER FROM",
        "1100-001",
        PRIORITY_FALLBACK,
        "Internal bank transfers from other accounts",
    ),
    RuleDefinition(
        "Ellis Park Stadium Rent",
        MatchType.CONTAINS,
        "ELLISPARK STADIUM",
        "8200",
        PRIORITY_HIGH,
        "Rent payments to Ellis Park Stadium",
    ),
    RuleDefinition(
        "EBS Car Sales Vehicle Purchase",
        MatchType.CONTAINS,
        "EBS CAR SALES",
        "2000",
        PRIORITY_HIGH,
        "Vehicle purchase from EBS Car Sales Mercedes",
    ),
    RuleDefinition(
        "Two Way Technologies Supplier",
        MatchType.CONTAINS,
        "TWO WAY TECHNOLOGIES",
        "8710",
        PRIORITY_HIGH,
        "Supplier payments to Two Way Technologies",
    ),
    RuleDefinition(
        "Rent A Dog Supplier",
        MatchType.CONTAINS,
        "RENT A DOG",
        "8710",
        PRIORITY_HIGH,
        "Supplier payments to Rent A Dog",
    ),
    RuleDefinition(
        "Neo Entle Labour Hire",
        MatchType.CONTAINS,
        "NEO ENTLE LABOUR",
        "8720",
        PRIORITY_HIGH,
        "HR management and labour hire from Neo Entle Labour Hire",
    ),
    RuleDefinition(
        "Stanlib Investment",
        MatchType.CONTAINS,
        "STANLIB",
        "2200",
        PRIORITY_HIGH,
        "Investment transactions with Stanlib",
    ),
    RuleDefinition(
        "DB Projects COGS",
        MatchType.CONTAINS,
        "DB PROJECTS",
        "8000",
        PRIORITY_HIGH,
        "Cost of goods sold - DB Projects and Agencies",
    ),
    RuleDefinition(
        "Lyceum College School Fees",
        MatchType.CONTAINS,
        "LYCEUM COLLEGE",
        "8730",
        PRIORITY_HIGH,
        "School fees at Lyceum College",
    ),
    RuleDefinition(
        "Anthony Ndou Salary",
        MatchType.CONTAINS,
        "ANTHONY NDOU",
        "8100",
        PRIORITY_STANDARD,
        "Salary payment to Anthony Ndou",
    ),
    RuleDefinition(
        "Goodman Zunga Salary",
        MatchType.CONTAINS,
        "GOODMAN ZUNGA",
        "8100",
        PRIORITY_STANDARD,
        "Salary payment to Goodman Zunga",
    ),
    RuleDefinition(
        "Salary Payments - XG SALARIES",
        MatchType.CONTAINS,
        "XG SALARIES",
        "8100",
        PRIORITY_STANDARD,
        "Standard salary payments with XG SALARIES keyword",
    ),
    RuleDefinition(
        "Salary Payments - SALARIES",
        MatchType.CONTAINS,
        "SALARIES",
        "8100",
        PRIORITY_STANDARD,
        "Standard salary payments with SALARIES keyword",
    ),
    RuleDefinition(
        "Salary Payments - WAGES",
        MatchType.CONTAINS,
        "WAGES",
        "8100",
        PRIORITY_STANDARD,
        "Wage payments to employees",
    ),
    # Keyword fallbacks, bank charges and offsets
    RuleDefinition(
        "Education Institutions - Generic",
        MatchType.REGEX,
        ".*(COLLEGE|SCHOOL|UNIVERSITY).*",
        "9300",
        PRIORITY_GENERIC,
        "Generic rule for college, school, and university fees",
    ),
    RuleDefinition(
        "Insurance Premiums - Generic",
        MatchType.CONTAINS,
        "INSURANCE",
        "8800",
        PRIORITY_GENERIC,
        "Insurance premium payments to providers",
    ),
    RuleDefinition(
        "Insurance Premiums - PREMIUM keyword",
        MatchType.CONTAINS,
        "PREMIUM",
        "8800",
        PRIORITY_GENERIC,
        "Premium payments",
    ),
    RuleDefinition(
        "Bank Charges - FEE keyword",
        MatchType.CONTAINS,
        "FEE",
        "9600",
        PRIORITY_HIGHEST,
        "Bank fees and charges",
    ),
    RuleDefinition(
        "Bank Charges - SERVICE FEE",
        MatchType.CONTAINS,
        "SERVICE FEE",
        "9600",
        PRIORITY_HIGHEST,
        "Monthly service fees",
    ),
    RuleDefinition(
        "Bank Charges - CHARGE keyword",
        MatchType.CONTAINS,
        "CHARGE",
        "9600",
        PRIORITY_HIGHEST,
        "Bank charges and fees",
    ),
    RuleDefinition(
        "Loan Payments - Generic",
        MatchType.CONTAINS,
        "LOAN",
        "4000",
        PRIORITY_GENERIC,
        "Loan payments and repayments",
    ),
    RuleDefinition(
        "MAGTAPE CREDIT COMPANY ASSIST",
        MatchType.CONTAINS,
        "MAGTAPE CREDIT COMPANY ASSIST",
        "4000",
        PRIORITY_FALLBACK,
        "Credit company assistance payments (loans)",
    ),
    RuleDefinition(
        "IB Payment To - Generic Fallback",
        MatchType.REGEX,
        "^IB PAYMENT TO$",
        "8100",
        PRIORITY_FALLBACK,
        "Generic IB payment to unspecified recipients (expense)",
    ),
    RuleDefinition(
        "Immediate Payment - Generic Fallback",
        MatchType.REGEX,
        "^IMMEDIATE PAYMENT$",
        "8100",
        PRIORITY_FALLBACK,
        "Generic immediate payment to unspecified recipients",
    ),
    RuleDefinition(
        "Debit Transfer - Collections",
        MatchType.CONTAINS,
        "MIWAY",
        "8800-004",
        PRIORITY_FALLBACK,
        "DEBIT TRANSFER MIWAYCOLLE00000057007338240401",
    ),
    RuleDefinition(
        "Mobile Phone Payments - MTN",
        MatchType.CONTAINS,
        "PRE-PAID PAYMENT TO MTN PREPAID",
        "8600",
        PRIORITY_FALLBACK,
        "MTN prepaid mobile phone payments",
    ),
    RuleDefinition(
        "Mobile Phone Payments - VOD",
        MatchType.CONTAINS,
        "PRE-PAID PAYMENT TO VOD PREPAID",
        "8600",
        PRIORITY_FALLBACK,
        "Vodacom prepaid mobile phone payments",
    ),
    RuleDefinition(
        "Interest Adjustment/Refund",
        MatchType.CONTAINS,
        "INTEREST ADJUSTMENT/REFUND",
        "9500",
        PRIORITY_FALLBACK,
        "Bank interest adjustments and refunds",
    ),
    RuleDefinition(
        "Account Payment - Generic",
        MatchType.REGEX,
        "^ACCOUNT PAYMENT$",
        "8710",
        PRIORITY_FALLBACK,
        "Generic account payments",
    ),
    RuleDefinition(
        "MAGTAPE CREDIT XINGHIZANA 13AUGLOA",
        MatchType.CONTAINS,
        "MAGTAPE CREDIT XINGHIZANA 13AUGLOA",
        "4000",
        PRIORITY_LOW,
        "MAGTAPE credit payment to XINGHIZANA 13AUGLOA (loan payment)",
    ),
    RuleDefinition(
        "MAGTAPE CREDIT XG LOA MAPHOSA",
        MatchType.CONTAINS,
        "MAGTAPE CREDIT XG LOA MAPHOSA",
        "4000",
        PRIORITY_LOW,
        "MAGTAPE credit payment XG LOA MAPHOSA (loan payment)",
    ),
    RuleDefinition(
        "MAGTAPE CREDIT 001 UNPAIDS/WEIERINGS CAPITEC",
        MatchType.CONTAINS,
        "MAGTAPE CREDIT 001 UNPAIDS/WEIERINGS CAPITEC",
        "4000",
        PRIORITY_LOW,
        "MAGTAPE credit payment to UNPAIDS/WEIERINGS CAPITEC (loan payment)",
    ),
    RuleDefinition(
        "CASH DEPOSIT STOKFELA",
        MatchType.CONTAINS,
        "CASH DEPOSIT STOKFELA",
        "1000",
        PRIORITY_LOW,
        "Cash deposit to stokvela account",
    ),
    RuleDefinition(
        "AUTOBANK INSTANTMONEY CASH TO",
        MatchType.CONTAINS,
        "AUTOBANK INSTANTMONEY CASH TO",
        "8100",
        PRIORITY_LOW,
        "Cash withdrawal via Instant Money",
    ),
    RuleDefinition(
        "AUTOBANK TRANSFER FROM ACCOUNT",
        MatchType.CONTAINS,
        "AUTOBANK TRANSFER FROM ACCOUNT",
        "1100-001",
        PRIORITY_LOW,
        "Bank transfer from another account",
    ),
)
