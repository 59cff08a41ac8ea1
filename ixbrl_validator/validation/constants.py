# Path: ixbrl_validator/validation/constants.py
"""
Validation Module Constants

Central repository for all validation-related codes, messages, fixed
lists and patterns.

Diagnostic codes are a stable public contract: callers match on them.
Messages are str.format templates and may change wording freely.
"""

import re

# ==============================================================================
# VALIDATOR NAMES
# ==============================================================================

VALIDATOR_STRUCTURAL = "structural"
VALIDATOR_CONTEXTS = "contexts_units"
VALIDATOR_COMPLETENESS = "completeness"
VALIDATOR_CROSS_REFERENCE = "cross_reference"
VALIDATOR_FACT_VALUES = "fact_values"
VALIDATOR_PLACEHOLDERS = "placeholders"
VALIDATOR_QNAMES = "qnames"
VALIDATOR_DISCLOSURES = "disclosures"

# ==============================================================================
# VALIDATION CATEGORIES
# ==============================================================================

CATEGORY_STRUCTURAL = "structural"
CATEGORY_REFERENTIAL = "referential"
CATEGORY_COMPLETENESS = "completeness"
CATEGORY_VALUES = "values"
CATEGORY_CONTENT = "content"

VALIDATION_CATEGORIES = [
    CATEGORY_STRUCTURAL,
    CATEGORY_REFERENTIAL,
    CATEGORY_COMPLETENESS,
    CATEGORY_VALUES,
    CATEGORY_CONTENT,
]

# Execution order (lower runs first); passes are independent, order only
# fixes the diagnostic order in the result
PRIORITY_STRUCTURAL = 10
PRIORITY_CONTEXTS = 20
PRIORITY_COMPLETENESS = 30
PRIORITY_CROSS_REFERENCE = 40
PRIORITY_FACT_VALUES = 50
PRIORITY_QNAMES = 60
PRIORITY_DISCLOSURES = 70
PRIORITY_PLACEHOLDERS = 80

# ==============================================================================
# DIAGNOSTIC CODES - PIPELINE
# ==============================================================================

ERR_VALIDATION_EXCEPTION = "VALIDATION_EXCEPTION"
ERR_VALIDATION_TIMEOUT = "VALIDATION_TIMEOUT"

MSG_VALIDATION_EXCEPTION = "Validation pass '{validator}' failed: {detail}"
MSG_VALIDATION_TIMEOUT = "Validation did not complete within {timeout:g}s"

# ==============================================================================
# DIAGNOSTIC CODES - STRUCTURAL
# ==============================================================================

ERR_MISSING_NAMESPACE = "MISSING_NAMESPACE"
ERR_INCORRECT_NAMESPACE_URI = "INCORRECT_NAMESPACE_URI"
ERR_MISSING_IX_HEADER = "MISSING_IX_HEADER"
ERR_MULTIPLE_IX_HEADERS = "MULTIPLE_IX_HEADERS"
ERR_MISSING_SCHEMA_REF = "MISSING_SCHEMA_REF"
ERR_INVALID_SCHEMA_REF = "INVALID_SCHEMA_REF"

MSG_MISSING_NAMESPACE = "Required namespace '{prefix}' is not declared"
MSG_INCORRECT_NAMESPACE_URI = "Namespace '{prefix}' has incorrect URI. Expected: {expected}, Got: {actual}"
MSG_MISSING_IX_HEADER = "Missing required ix:header element"
MSG_MULTIPLE_IX_HEADERS = "Document contains {count} ix:header elements, exactly one is allowed"
MSG_MISSING_SCHEMA_REF = "Missing schema reference in ix:header"
MSG_INVALID_SCHEMA_REF = "Schema reference must point to FRC taxonomy: {href}"

# ==============================================================================
# DIAGNOSTIC CODES - CONTEXTS & UNITS
# ==============================================================================

ERR_MISSING_CONTEXTS = "MISSING_CONTEXTS"
ERR_CONTEXT_MISSING_ID = "CONTEXT_MISSING_ID"
ERR_DUPLICATE_CONTEXT_ID = "DUPLICATE_CONTEXT_ID"
ERR_CONTEXT_MISSING_ENTITY = "CONTEXT_MISSING_ENTITY"
ERR_CONTEXT_MISSING_IDENTIFIER = "CONTEXT_MISSING_IDENTIFIER"
ERR_CONTEXT_MISSING_PERIOD = "CONTEXT_MISSING_PERIOD"
ERR_INVALID_CONTEXT_PERIOD = "INVALID_CONTEXT_PERIOD"
ERR_AMBIGUOUS_CONTEXT_PERIOD = "AMBIGUOUS_CONTEXT_PERIOD"
ERR_INVALID_INSTANT_DATE = "INVALID_INSTANT_DATE"
ERR_INVALID_START_DATE = "INVALID_START_DATE"
ERR_INVALID_END_DATE = "INVALID_END_DATE"
ERR_INVALID_DATE_RANGE = "INVALID_DATE_RANGE"

ERR_MISSING_UNITS = "MISSING_UNITS"
ERR_UNIT_MISSING_ID = "UNIT_MISSING_ID"
ERR_DUPLICATE_UNIT_ID = "DUPLICATE_UNIT_ID"
ERR_UNIT_MISSING_MEASURE = "UNIT_MISSING_MEASURE"

MSG_MISSING_CONTEXTS = "No contexts defined in document"
MSG_CONTEXT_MISSING_ID = "Context element missing required id attribute"
MSG_DUPLICATE_CONTEXT_ID = "Context id '{context_id}' is declared more than once"
MSG_CONTEXT_MISSING_ENTITY = "Context {context_id} missing entity element"
MSG_CONTEXT_MISSING_IDENTIFIER = "Context {context_id} entity missing identifier"
MSG_CONTEXT_MISSING_PERIOD = "Context {context_id} missing period element"
MSG_INVALID_CONTEXT_PERIOD = "Context {context_id} must have either instant or startDate/endDate"
MSG_AMBIGUOUS_CONTEXT_PERIOD = "Context {context_id} cannot have both instant and duration"
MSG_INVALID_INSTANT_DATE = "Context {context_id} has invalid instant date: {value}"
MSG_INVALID_START_DATE = "Context {context_id} has invalid start date: {value}"
MSG_INVALID_END_DATE = "Context {context_id} has invalid end date: {value}"
MSG_INVALID_DATE_RANGE = "Context {context_id} end date must be after start date"

MSG_MISSING_UNITS = "No units defined in document"
MSG_UNIT_MISSING_ID = "Unit element missing required id attribute"
MSG_DUPLICATE_UNIT_ID = "Unit id '{unit_id}' is declared more than once"
MSG_UNIT_MISSING_MEASURE = "Unit {unit_id} missing measure element"

# Placeholder used in messages for contexts/units without an id
UNKNOWN_ID = "unknown"

# ==============================================================================
# DIAGNOSTIC CODES - COMPLETENESS
# ==============================================================================

ERR_MISSING_REQUIRED_ELEMENT = "MISSING_REQUIRED_ELEMENT"
ERR_MISSING_PROFIT_LOSS = "MISSING_PROFIT_LOSS"
ERR_MISSING_DIRECTORS_REPORT = "MISSING_DIRECTORS_REPORT"
ERR_MISSING_DIRECTOR_NAMES = "MISSING_DIRECTOR_NAMES"
ERR_MISSING_AVERAGE_EMPLOYEES = "MISSING_AVERAGE_EMPLOYEES"
WARN_MISSING_RECOMMENDED_ELEMENT = "MISSING_RECOMMENDED_ELEMENT"

MSG_MISSING_REQUIRED_ELEMENT = "Required element {name} ({description}) is missing"
MSG_MISSING_PROFIT_LOSS = "Profit and loss account information (Turnover) is required"
MSG_MISSING_DIRECTORS_REPORT = "Directors' report with principal activities is required for {size} entities"
MSG_MISSING_DIRECTOR_NAMES = "Director names must be disclosed for {size} entities"
MSG_MISSING_AVERAGE_EMPLOYEES = "Average number of employees must be disclosed"
MSG_MISSING_RECOMMENDED_ELEMENT = "Recommended element {name} ({description}) is missing"

# Regulatory invariants enforced independently of the rule tables
TURNOVER_ELEMENT = "uk-gaap:Turnover"
PRINCIPAL_ACTIVITIES_ELEMENT = "uk-bus:DescriptionPrincipalActivities"
DIRECTOR_NAME_ELEMENT = "uk-bus:NameEntityOfficer"
AVERAGE_EMPLOYEES_ELEMENT = "uk-bus:AverageNumberEmployeesDuringPeriod"

# ==============================================================================
# DIAGNOSTIC CODES - CROSS REFERENCES
# ==============================================================================

ERR_INVALID_CONTEXT_REF = "INVALID_CONTEXT_REF"
ERR_INVALID_UNIT_REF = "INVALID_UNIT_REF"

MSG_INVALID_CONTEXT_REF = "Referenced context '{ref}' does not exist"
MSG_INVALID_UNIT_REF = "Referenced unit '{ref}' does not exist"

# ==============================================================================
# DIAGNOSTIC CODES - FACT VALUES
# ==============================================================================

WARN_EMPTY_NUMERIC_FACT = "EMPTY_NUMERIC_FACT"
ERR_MISSING_CONTEXT_REF = "MISSING_CONTEXT_REF"
ERR_MISSING_DECIMALS_ATTRIBUTE = "MISSING_DECIMALS_ATTRIBUTE"
ERR_MISSING_UNIT_REF = "MISSING_UNIT_REF"
ERR_INVALID_NUMERIC_VALUE = "INVALID_NUMERIC_VALUE"
WARN_SUSPICIOUS_ZERO_VALUE = "SUSPICIOUS_ZERO_VALUE"
WARN_DOUBLE_NEGATIVE_VALUE = "DOUBLE_NEGATIVE_VALUE"
WARN_EMPTY_TEXTUAL_FACT = "EMPTY_TEXTUAL_FACT"

MSG_EMPTY_NUMERIC_FACT = "Numeric fact {name} has no value"
MSG_MISSING_CONTEXT_REF = "Fact {name} missing contextRef"
MSG_MISSING_DECIMALS_ATTRIBUTE = "Numeric fact {name} missing decimals attribute"
MSG_MISSING_UNIT_REF = "Numeric fact {name} missing unitRef"
MSG_INVALID_NUMERIC_VALUE = "Invalid numeric value in {name}: {value}"
MSG_SUSPICIOUS_ZERO_VALUE = "Zero value for major account {name} - please verify"
MSG_DOUBLE_NEGATIVE_VALUE = "Fact {name} has sign=\"-\" but its displayed value is already negative: {value}"
MSG_EMPTY_TEXTUAL_FACT = "Text fact {name} is empty"

# Characters removed before numeric parsing
CURRENCY_SYMBOLS = ('£', '$', '€')
THOUSANDS_SEPARATOR = ','
DECIMAL_POINT = '.'

# Fully parenthesized value = negative (UK accounting convention)
PARENTHESIZED_NEGATIVE = re.compile(r'^\((.*)\)$', re.DOTALL)

# Name substrings of accounts where a zero is worth a second look
MAJOR_ACCOUNT_MARKERS = (
    'FixedAssets',
    'CurrentAssets',
    'Turnover',
    'NetAssetsLiabilities',
    'CalledUpShareCapital',
)

# iXBRL sign attribute value that negates the displayed number
NEGATIVE_SIGN = '-'

# ==============================================================================
# PLACEHOLDER DETECTION
# ==============================================================================

PLACEHOLDER_TYPE = "placeholder"
INVALID_DATE_TYPE = "invalid_date"

MSG_PLACEHOLDER_DETECTED = "Potential placeholder detected in {name}"
MSG_INVALID_DATE = "Invalid date format in {name}: expected YYYY-MM-DD"
MSG_REPEATED_CHARACTERS = "Suspicious repeated characters in {name}"

# Ordered (name, pattern); the first match wins
PLACEHOLDER_PATTERNS: tuple[tuple[str, re.Pattern], ...] = (
    ('bracket_token', re.compile(r'\[.*?\]')),
    ('brace_token', re.compile(r'\{.*?\}')),
    ('repeated_x', re.compile(r'XXX+', re.IGNORECASE)),
    ('to_be_determined', re.compile(r'TBD|TO BE DETERMINED|PLACEHOLDER', re.IGNORECASE)),
    ('insert_instruction', re.compile(r'INSERT\s+\w+', re.IGNORECASE)),
    ('fill_in_instruction', re.compile(r'FILL\s+IN', re.IGNORECASE)),
    ('angle_token', re.compile(r'<.*?>')),
    ('sample_text', re.compile(r'EXAMPLE|SAMPLE|TEST', re.IGNORECASE)),
    ('company_name_stand_in', re.compile(r'Company\s*Name', re.IGNORECASE)),
    ('director_name_stand_in', re.compile(r'Director\s*Name', re.IGNORECASE)),
    ('day_first_date_template', re.compile(r'DD[/\-.]MM[/\-.]YYYY', re.IGNORECASE)),
    ('year_first_date_template', re.compile(r'YYYY[/\-.]MM[/\-.]DD', re.IGNORECASE)),
    ('zero_date', re.compile(r'00/00/0000')),
    ('max_date', re.compile(r'99/99/9999')),
)

# Name fragments marking date-bearing taxonomy elements
DATE_FIELD_MARKERS = (
    'BalanceSheetDate',
    'StartDateForPeriodCoveredByReport',
    'EndDateForPeriodCoveredByReport',
    'DateAuthorisationFinancialStatementsForIssue',
    'Date',
)

# Five or more identical consecutive characters
REPEATED_CHARACTERS_PATTERN = re.compile(r'(.)\1{4,}')

# Runs of whitespace collapsed before content checks
WHITESPACE_RUN = re.compile(r'\s+')

# ==============================================================================
# QNAME CHECKS
# ==============================================================================

ERR_INVALID_QNAME = "INVALID_QNAME"
WARN_UNKNOWN_QNAME_PREFIX = "UNKNOWN_QNAME_PREFIX"

MSG_INVALID_QNAME = "Invalid QName \"{name}\" contains spaces"
MSG_UNKNOWN_QNAME_PREFIX = "QName \"{name}\" uses unknown prefix \"{prefix}\""

KNOWN_QNAME_PREFIXES = ('uk-gaap', 'uk-core', 'uk-bus', 'ix', 'xbrli')

# Tag prefix of inline XBRL elements whose name attribute is a QName
IX_TAG_PREFIX = 'ix:'

# ==============================================================================
# DISCLOSURE RECOMMENDATIONS
# ==============================================================================

WARN_MISSING_ACCOUNTING_FRAMEWORK = "MISSING_ACCOUNTING_FRAMEWORK"
WARN_MISSING_ACCOUNTING_POLICIES = "MISSING_ACCOUNTING_POLICIES"
WARN_MISSING_AUDIT_EXEMPTION = "MISSING_AUDIT_EXEMPTION"

MSG_MISSING_ACCOUNTING_FRAMEWORK = "Accounting framework (FRS102/FRS105/FRS101/UKIFRS) should be declared"
MSG_MISSING_ACCOUNTING_POLICIES = "Accounting policies should be tagged with uk-bus:AccountingPolicy"
MSG_MISSING_AUDIT_EXEMPTION = "Audit exemption statement is recommended for {size} entities"

ACCOUNTING_FRAMEWORKS = ('FRS102', 'FRS105', 'FRS101', 'UKIFRS')
ACCOUNTING_POLICY_PREFIX = 'uk-bus:AccountingPolicy'
AUDIT_EXEMPTION_ELEMENT = 'uk-bus:StatementOnComplianceWithAuditExemptionProvisions'

__all__ = [
    'VALIDATOR_STRUCTURAL',
    'VALIDATOR_CONTEXTS',
    'VALIDATOR_COMPLETENESS',
    'VALIDATOR_CROSS_REFERENCE',
    'VALIDATOR_FACT_VALUES',
    'VALIDATOR_PLACEHOLDERS',
    'VALIDATOR_QNAMES',
    'VALIDATOR_DISCLOSURES',
    'CATEGORY_STRUCTURAL',
    'CATEGORY_REFERENTIAL',
    'CATEGORY_COMPLETENESS',
    'CATEGORY_VALUES',
    'CATEGORY_CONTENT',
    'VALIDATION_CATEGORIES',
    'PRIORITY_STRUCTURAL',
    'PRIORITY_CONTEXTS',
    'PRIORITY_COMPLETENESS',
    'PRIORITY_CROSS_REFERENCE',
    'PRIORITY_FACT_VALUES',
    'PRIORITY_QNAMES',
    'PRIORITY_DISCLOSURES',
    'PRIORITY_PLACEHOLDERS',
    'ERR_VALIDATION_EXCEPTION',
    'ERR_VALIDATION_TIMEOUT',
    'MSG_VALIDATION_EXCEPTION',
    'MSG_VALIDATION_TIMEOUT',
    'ERR_MISSING_NAMESPACE',
    'ERR_INCORRECT_NAMESPACE_URI',
    'ERR_MISSING_IX_HEADER',
    'ERR_MULTIPLE_IX_HEADERS',
    'ERR_MISSING_SCHEMA_REF',
    'ERR_INVALID_SCHEMA_REF',
    'MSG_MISSING_NAMESPACE',
    'MSG_INCORRECT_NAMESPACE_URI',
    'MSG_MISSING_IX_HEADER',
    'MSG_MULTIPLE_IX_HEADERS',
    'MSG_MISSING_SCHEMA_REF',
    'MSG_INVALID_SCHEMA_REF',
    'ERR_MISSING_CONTEXTS',
    'ERR_CONTEXT_MISSING_ID',
    'ERR_DUPLICATE_CONTEXT_ID',
    'ERR_CONTEXT_MISSING_ENTITY',
    'ERR_CONTEXT_MISSING_IDENTIFIER',
    'ERR_CONTEXT_MISSING_PERIOD',
    'ERR_INVALID_CONTEXT_PERIOD',
    'ERR_AMBIGUOUS_CONTEXT_PERIOD',
    'ERR_INVALID_INSTANT_DATE',
    'ERR_INVALID_START_DATE',
    'ERR_INVALID_END_DATE',
    'ERR_INVALID_DATE_RANGE',
    'ERR_MISSING_UNITS',
    'ERR_UNIT_MISSING_ID',
    'ERR_DUPLICATE_UNIT_ID',
    'ERR_UNIT_MISSING_MEASURE',
    'MSG_MISSING_CONTEXTS',
    'MSG_CONTEXT_MISSING_ID',
    'MSG_DUPLICATE_CONTEXT_ID',
    'MSG_CONTEXT_MISSING_ENTITY',
    'MSG_CONTEXT_MISSING_IDENTIFIER',
    'MSG_CONTEXT_MISSING_PERIOD',
    'MSG_INVALID_CONTEXT_PERIOD',
    'MSG_AMBIGUOUS_CONTEXT_PERIOD',
    'MSG_INVALID_INSTANT_DATE',
    'MSG_INVALID_START_DATE',
    'MSG_INVALID_END_DATE',
    'MSG_INVALID_DATE_RANGE',
    'MSG_MISSING_UNITS',
    'MSG_UNIT_MISSING_ID',
    'MSG_DUPLICATE_UNIT_ID',
    'MSG_UNIT_MISSING_MEASURE',
    'UNKNOWN_ID',
    'ERR_MISSING_REQUIRED_ELEMENT',
    'ERR_MISSING_PROFIT_LOSS',
    'ERR_MISSING_DIRECTORS_REPORT',
    'ERR_MISSING_DIRECTOR_NAMES',
    'ERR_MISSING_AVERAGE_EMPLOYEES',
    'WARN_MISSING_RECOMMENDED_ELEMENT',
    'MSG_MISSING_REQUIRED_ELEMENT',
    'MSG_MISSING_PROFIT_LOSS',
    'MSG_MISSING_DIRECTORS_REPORT',
    'MSG_MISSING_DIRECTOR_NAMES',
    'MSG_MISSING_AVERAGE_EMPLOYEES',
    'MSG_MISSING_RECOMMENDED_ELEMENT',
    'TURNOVER_ELEMENT',
    'PRINCIPAL_ACTIVITIES_ELEMENT',
    'DIRECTOR_NAME_ELEMENT',
    'AVERAGE_EMPLOYEES_ELEMENT',
    'ERR_INVALID_CONTEXT_REF',
    'ERR_INVALID_UNIT_REF',
    'MSG_INVALID_CONTEXT_REF',
    'MSG_INVALID_UNIT_REF',
    'WARN_EMPTY_NUMERIC_FACT',
    'ERR_MISSING_CONTEXT_REF',
    'ERR_MISSING_DECIMALS_ATTRIBUTE',
    'ERR_MISSING_UNIT_REF',
    'ERR_INVALID_NUMERIC_VALUE',
    'WARN_SUSPICIOUS_ZERO_VALUE',
    'WARN_DOUBLE_NEGATIVE_VALUE',
    'WARN_EMPTY_TEXTUAL_FACT',
    'MSG_EMPTY_NUMERIC_FACT',
    'MSG_MISSING_CONTEXT_REF',
    'MSG_MISSING_DECIMALS_ATTRIBUTE',
    'MSG_MISSING_UNIT_REF',
    'MSG_INVALID_NUMERIC_VALUE',
    'MSG_SUSPICIOUS_ZERO_VALUE',
    'MSG_DOUBLE_NEGATIVE_VALUE',
    'MSG_EMPTY_TEXTUAL_FACT',
    'CURRENCY_SYMBOLS',
    'THOUSANDS_SEPARATOR',
    'DECIMAL_POINT',
    'PARENTHESIZED_NEGATIVE',
    'MAJOR_ACCOUNT_MARKERS',
    'NEGATIVE_SIGN',
    'PLACEHOLDER_TYPE',
    'INVALID_DATE_TYPE',
    'MSG_PLACEHOLDER_DETECTED',
    'MSG_INVALID_DATE',
    'MSG_REPEATED_CHARACTERS',
    'PLACEHOLDER_PATTERNS',
    'DATE_FIELD_MARKERS',
    'REPEATED_CHARACTERS_PATTERN',
    'WHITESPACE_RUN',
    'ERR_INVALID_QNAME',
    'WARN_UNKNOWN_QNAME_PREFIX',
    'MSG_INVALID_QNAME',
    'MSG_UNKNOWN_QNAME_PREFIX',
    'KNOWN_QNAME_PREFIXES',
    'IX_TAG_PREFIX',
    'WARN_MISSING_ACCOUNTING_FRAMEWORK',
    'WARN_MISSING_ACCOUNTING_POLICIES',
    'WARN_MISSING_AUDIT_EXEMPTION',
    'MSG_MISSING_ACCOUNTING_FRAMEWORK',
    'MSG_MISSING_ACCOUNTING_POLICIES',
    'MSG_MISSING_AUDIT_EXEMPTION',
    'ACCOUNTING_FRAMEWORKS',
    'ACCOUNTING_POLICY_PREFIX',
    'AUDIT_EXEMPTION_ELEMENT',
]
