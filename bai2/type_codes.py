# Copyright 2019 Open End AB
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from collections import namedtuple


class UnknownCode(ValueError):
    pass


TypeCode = namedtuple('TypeCode', 'code transaction level description')


def _table(name, table, code):
    try:
        return table[code]
    except KeyError:
        raise UnknownCode('Unknown %s: %r' % (name, code))


def group_status(code):
    return _table('group status', group_statuses, code)


def as_of_date_modifier(code):
    return _table('as-of-date modifier', as_of_date_modifiers, code)


def funds_type(qualifier):
    return _table('funds type', funds_types, qualifier)


def lookup(code):
    """Return the TypeCode for a BAI2 type code.

    Codes 900-999 are reserved for bank specific use and are accepted
    with a generic description. Anything else not in the table raises
    UnknownCode.
    """
    try:
        transaction, level, description = type_codes[code]
    except KeyError:
        for start, stop, transaction, level in custom_ranges:
            if start <= code <= stop:
                description = 'Customized %s %s' % (
                    {'CR': 'credit', 'DB': 'debit'}[transaction], level)
                break
        else:
            raise UnknownCode('Unknown type code: %03d' % code)
    return TypeCode(code, transaction, level, description)


def detail_code(code):
    tc = lookup(code)
    if tc.level != 'detail':
        raise UnknownCode('Not a detail type code: %03d' % code)
    return tc


group_statuses = {
    1: 'Update',
    2: 'Deletion',
    3: 'Correction',
    4: 'Test Only',
    }

as_of_date_modifiers = {
    1: 'Interim previous-day data',
    2: 'Final previous-day data',
    3: 'Interim same-day data',
    4: 'Final same-day data',
    }

# Funds type qualifiers. S, V and D are followed by further fields.
funds_types = {
    'Z': 'Unknown',
    '0': 'Immediate availability',
    '1': 'One-day availability',
    '2': 'Two or more days availability',
    'S': 'Distributed availability',
    'V': 'Value dated',
    'D': 'Distributed availability, by days',
    }

custom_ranges = [
    (900, 919, 'CR', 'summary'),
    (920, 959, 'CR', 'detail'),
    (960, 979, 'DB', 'summary'),
    (980, 999, 'DB', 'detail'),
    ]

# code: (transaction, level, description)
# transaction is CR (credit), DB (debit) or NA (not applicable)
type_codes = {
    # Account status
    10: ('NA', 'status', 'Opening Ledger'),
    11: ('NA', 'status', 'Average Opening Ledger MTD'),
    12: ('NA', 'status', 'Average Opening Ledger YTD'),
    15: ('NA', 'status', 'Closing Ledger'),
    20: ('NA', 'status', 'Average Closing Ledger MTD'),
    21: ('NA', 'status', 'Average Closing Ledger - Previous Month'),
    22: ('NA', 'status', 'Aggregate Balance Adjustments'),
    24: ('NA', 'status', 'Average Closing Ledger YTD - Previous Month'),
    25: ('NA', 'status', 'Average Closing Ledger YTD'),
    30: ('NA', 'status', 'Current Ledger'),
    37: ('NA', 'status', 'ACH Net Position'),
    39: ('NA', 'status', 'Opening Available + Total Same-Day ACH DTC Deposit'),
    40: ('NA', 'status', 'Opening Available'),
    41: ('NA', 'status', 'Average Opening Available MTD'),
    42: ('NA', 'status', 'Average Opening Available YTD'),
    43: ('NA', 'status', 'Average Available - Previous Month'),
    44: ('NA', 'status', 'Disbursing Opening Available Balance'),
    45: ('NA', 'status', 'Closing Available'),
    50: ('NA', 'status', 'Average Closing Available MTD'),
    51: ('NA', 'status', 'Average Closing Available - Last Month'),
    54: ('NA', 'status', 'Average Closing Available YTD - Last Month'),
    55: ('NA', 'status', 'Average Closing Available YTD'),
    56: ('NA', 'status', 'Loan Balance'),
    57: ('NA', 'status', 'Total Investment Position'),
    59: ('NA', 'status', 'Current Available (CRS Suppressed)'),
    60: ('NA', 'status', 'Current Available'),
    61: ('NA', 'status', 'Average Current Available MTD'),
    62: ('NA', 'status', 'Average Current Available YTD'),
    63: ('NA', 'status', 'Total Float'),
    65: ('NA', 'status', 'Target Balance'),
    66: ('NA', 'status', 'Adjusted Balance'),
    67: ('NA', 'status', 'Adjusted Balance MTD'),
    68: ('NA', 'status', 'Adjusted Balance YTD'),
    70: ('NA', 'status', '0-Day Float'),
    72: ('NA', 'status', '1-Day Float'),
    73: ('NA', 'status', 'Float Adjustment'),
    74: ('NA', 'status', '2 or More Days Float'),
    75: ('NA', 'status', '3 or More Days Float'),
    76: ('NA', 'status', 'Adjustment to Balances'),
    77: ('NA', 'status', 'Average Adjustment to Balances MTD'),
    78: ('NA', 'status', 'Average Adjustment to Balances YTD'),
    79: ('NA', 'status', '4-Day Float'),
    80: ('NA', 'status', '5-Day Float'),
    81: ('NA', 'status', '6-Day Float'),
    82: ('NA', 'status', 'Average 1-Day Float MTD'),
    83: ('NA', 'status', 'Average 1-Day Float YTD'),
    84: ('NA', 'status', 'Average 2-Day Float MTD'),
    85: ('NA', 'status', 'Average 2-Day Float YTD'),
    86: ('NA', 'status', 'Transfer Calculation'),
    100: ('CR', 'summary', 'Total Credits'),
    101: ('CR', 'summary', 'Total Credit Amount MTD'),
    105: ('CR', 'summary', 'Credits Not Detailed'),
    106: ('CR', 'summary', 'Deposits Subject to Float'),
    107: ('CR', 'summary', 'Total Adjustment Credits YTD'),
    108: ('CR', 'detail', 'Credit (Any Type)'),
    109: ('CR', 'summary', 'Current Day Total Lockbox Deposits'),
    110: ('CR', 'summary', 'Total Lockbox Deposits'),
    115: ('CR', 'detail', 'Lockbox Deposit'),
    116: ('CR', 'detail', 'Item in Lockbox Deposit'),
    118: ('CR', 'detail', 'Lockbox Adjustment Credit'),
    120: ('CR', 'summary', 'EDI Transaction Credit'),
    121: ('CR', 'detail', 'EDI Transaction Credit'),
    122: ('CR', 'detail', 'EDIBANX Credit Received'),
    123: ('CR', 'detail', 'EDIBANX Credit Return'),
    130: ('CR', 'summary', 'Total Concentration Credits'),
    131: ('CR', 'summary', 'Total DTC Credits'),
    135: ('CR', 'detail', 'DTC Concentration Credit'),
    136: ('CR', 'detail', 'Item in DTC Deposit'),
    140: ('CR', 'summary', 'Total ACH Credits'),
    142: ('CR', 'detail', 'ACH Credit Received'),
    143: ('CR', 'detail', 'Item in ACH Deposit'),
    145: ('CR', 'detail', 'ACH Concentration Credit'),
    146: ('CR', 'summary', 'Total Bank Card Deposits'),
    147: ('CR', 'detail', 'Individual Bank Card Deposit'),
    150: ('CR', 'summary', 'Total Preauthorized Payment Credits'),
    155: ('CR', 'detail', 'Preauthorized Draft Credit'),
    156: ('CR', 'detail', 'Item in PAC Deposit'),
    160: ('CR', 'summary', 'Total ACH Disbursing Funding Credits'),
    162: ('CR', 'summary', 'Corporate Trade Payment Settlement'),
    163: ('CR', 'summary', 'Corporate Trade Payment Credits'),
    164: ('CR', 'detail', 'Corporate Trade Payment Credit'),
    165: ('CR', 'detail', 'Preauthorized ACH Credit'),
    166: ('CR', 'detail', 'ACH Settlement'),
    167: ('CR', 'summary', 'ACH Settlement Credits'),
    168: ('CR', 'detail', 'ACH Return Item or Adjustment Settlement'),
    169: ('CR', 'detail', 'Miscellaneous ACH Credit'),
    170: ('CR', 'summary', 'Total Other Check Deposits'),
    171: ('CR', 'detail', 'Individual Loan Deposit'),
    172: ('CR', 'detail', 'Deposit Correction'),
    173: ('CR', 'detail', 'Bank-Prepared Deposit'),
    174: ('CR', 'detail', 'Other Deposit'),
    175: ('CR', 'detail', 'Check Deposit Package'),
    176: ('CR', 'detail', 'Re-presented Check Deposit'),
    178: ('CR', 'summary', 'List Post Credits'),
    180: ('CR', 'summary', 'Total Loan Proceeds'),
    182: ('CR', 'summary', 'Total Bank-Prepared Deposits'),
    184: ('CR', 'detail', 'Draft Deposit'),
    185: ('CR', 'summary', 'Total Miscellaneous Deposits'),
    186: ('CR', 'summary', 'Total Cash Letter Credits'),
    187: ('CR', 'detail', 'Cash Letter Credit'),
    188: ('CR', 'summary', 'Total Cash Letter Adjustments'),
    189: ('CR', 'detail', 'Cash Letter Adjustment'),
    190: ('CR', 'summary', 'Total Incoming Money Transfers'),
    191: ('CR', 'detail', 'Individual Incoming Internal Money Transfer'),
    195: ('CR', 'detail', 'Incoming Money Transfer'),
    196: ('CR', 'detail', 'Money Transfer Adjustment'),
    198: ('CR', 'detail', 'Compensation'),
    200: ('CR', 'summary', 'Total Automatic Transfer Credits'),
    201: ('CR', 'detail', 'Individual Automatic Transfer Credit'),
    202: ('CR', 'detail', 'Bond Operations Credit'),
    205: ('CR', 'summary', 'Total Book Transfer Credits'),
    206: ('CR', 'detail', 'Book Transfer Credit'),
    207: ('CR', 'summary', 'Total International Money Transfer Credits'),
    208: ('CR', 'detail', 'Individual International Money Transfer Credit'),
    210: ('CR', 'summary', 'Total International Credits'),
    212: ('CR', 'detail', 'Foreign Letter of Credit'),
    213: ('CR', 'detail', 'Letter of Credit'),
    214: ('CR', 'detail', 'Foreign Exchange of Credit'),
    215: ('CR', 'summary', 'Total Letters of Credit'),
    216: ('CR', 'detail', 'Foreign Remittance Credit'),
    218: ('CR', 'detail', 'Foreign Collection Credit'),
    221: ('CR', 'detail', 'Foreign Check Purchase'),
    222: ('CR', 'detail', 'Foreign Checks Deposited'),
    224: ('CR', 'detail', 'Commission'),
    226: ('CR', 'detail', 'International Money Market Trading'),
    227: ('CR', 'detail', 'Standing Order'),
    229: ('CR', 'detail', 'Miscellaneous International Credit'),
    230: ('CR', 'summary', 'Total Security Credits'),
    231: ('CR', 'summary', 'Total Collection Credits'),
    232: ('CR', 'detail', 'Sale of Debt Security'),
    233: ('CR', 'detail', 'Securities Sold'),
    234: ('CR', 'detail', 'Sale of Equity Security'),
    235: ('CR', 'detail', 'Matured Reverse Repurchase Order'),
    236: ('CR', 'detail', 'Maturity of Debt Security'),
    237: ('CR', 'detail', 'Individual Collection Credit'),
    238: ('CR', 'detail', 'Collection of Dividends'),
    239: ('CR', 'summary', "Total Bankers' Acceptance Credits"),
    240: ('CR', 'detail', 'Coupon Collections - Banks'),
    241: ('CR', 'detail', "Bankers' Acceptances"),
    242: ('CR', 'detail', 'Collection of Interest Income'),
    243: ('CR', 'detail', 'Matured Fed Funds Purchased'),
    244: ('CR', 'detail', 'Interest/Matured Principal Payment'),
    245: ('CR', 'summary', 'Monthly Dividends'),
    246: ('CR', 'detail', 'Commercial Paper'),
    247: ('CR', 'detail', 'Capital Change'),
    248: ('CR', 'detail', 'Savings Bonds Sales Adjustment'),
    249: ('CR', 'detail', 'Miscellaneous Security Credit'),
    250: ('CR', 'summary', 'Total Checks Posted and Returned'),
    251: ('CR', 'summary', 'Total Debit Reversals'),
    252: ('CR', 'detail', 'Debit Reversal'),
    254: ('CR', 'detail', 'Posting Error Correction Credit'),
    255: ('CR', 'detail', 'Check Posted and Returned'),
    256: ('CR', 'summary', 'Total ACH Return Items'),
    257: ('CR', 'detail', 'Individual ACH Return Item'),
    258: ('CR', 'detail', 'ACH Reversal Credit'),
    260: ('CR', 'summary', 'Total Rejected Credits'),
    261: ('CR', 'detail', 'Individual Rejected Credit'),
    263: ('CR', 'detail', 'Overdraft'),
    266: ('CR', 'detail', 'Return Item'),
    268: ('CR', 'detail', 'Return Item Adjustment'),
    270: ('CR', 'summary', 'Total ZBA Credits'),
    271: ('CR', 'detail', 'ZBA Credit'),
    274: ('CR', 'detail', 'Cumulative ZBA or Disbursement Credits'),
    275: ('CR', 'detail', 'ZBA Credit Transfer'),
    276: ('CR', 'detail', 'ZBA Float Adjustment'),
    277: ('CR', 'detail', 'Controlled Disbursing Credit'),
    278: ('CR', 'detail', 'ZBA Credit Adjustment'),
    280: ('CR', 'summary', 'Total Controlled Disbursing Credits'),
    281: ('CR', 'detail', 'Individual Controlled Disbursing Credit'),
    285: ('CR', 'summary', 'Total DTC Disbursing Credits'),
    286: ('CR', 'detail', 'Individual DTC Disbursing Credit'),
    294: ('CR', 'summary', 'Total ATM Credits'),
    295: ('CR', 'detail', 'ATM Credit'),
    301: ('CR', 'detail', 'Commercial Deposit'),
    302: ('CR', 'summary', 'Correspondent Bank Deposit'),
    303: ('CR', 'summary', 'Total Wire Transfers In - FF'),
    304: ('CR', 'summary', 'Total Wire Transfers In - CHF'),
    305: ('CR', 'summary', 'Total Fed Funds Sold'),
    306: ('CR', 'detail', 'Fed Funds Sold'),
    307: ('CR', 'summary', 'Total Trust Credits'),
    308: ('CR', 'detail', 'Trust Credit'),
    309: ('CR', 'summary', 'Total Value-Dated Funds'),
    310: ('CR', 'detail', 'Value-Dated Funds'),
    315: ('CR', 'summary', 'Total International Credits - FF'),
    316: ('CR', 'summary', 'Total International Credits - CHF'),
    318: ('CR', 'summary', 'Total Foreign Check Purchased'),
    319: ('CR', 'summary', 'Late Deposit'),
    320: ('CR', 'summary', 'Total Securities Sold - FF'),
    321: ('CR', 'summary', 'Total Securities Sold - CHF'),
    324: ('CR', 'summary', 'Total Securities Matured - FF'),
    325: ('CR', 'summary', 'Total Securities Matured - CHF'),
    326: ('CR', 'summary', 'Total Securities Interest'),
    327: ('CR', 'summary', 'Total Securities Matured'),
    328: ('CR', 'summary', 'Total Securities Interest - FF'),
    329: ('CR', 'summary', 'Total Securities Interest - CHF'),
    330: ('CR', 'summary', 'Total Escrow Credits'),
    331: ('CR', 'detail', 'Individual Escrow Credit'),
    340: ('CR', 'summary', 'Total Broker Deposits'),
    341: ('CR', 'summary', 'Total Broker Deposits - FF'),
    342: ('CR', 'detail', 'Broker Deposit'),
    343: ('CR', 'summary', 'Total Broker Deposits - CHF'),
    344: ('CR', 'detail', 'Individual Back Value Credit'),
    345: ('CR', 'detail', 'Item in Brokers Deposit'),
    346: ('CR', 'detail', 'Sweep Interest Income'),
    347: ('CR', 'detail', 'Sweep Principal Sell'),
    348: ('CR', 'detail', 'Futures Credit'),
    349: ('CR', 'detail', 'Principal Payments Credit'),
    350: ('CR', 'summary', 'Investment Sold'),
    351: ('CR', 'detail', 'Individual Investment Sold'),
    352: ('CR', 'summary', 'Total Cash Center Credits'),
    353: ('CR', 'detail', 'Cash Center Credit'),
    354: ('CR', 'detail', 'Interest Credit'),
    355: ('CR', 'summary', 'Investment Interest'),
    356: ('CR', 'summary', 'Total Credit Adjustment'),
    357: ('CR', 'detail', 'Credit Adjustment'),
    358: ('CR', 'detail', 'YTD Adjustment Credit'),
    359: ('CR', 'detail', 'Interest Adjustment Credit'),
    360: ('CR', 'summary', 'Total Credits Less Wire Transfer and Returned Checks'),
    361: ('CR', 'summary', 'Grand Total Credits Less Grand Total Debits'),
    362: ('CR', 'detail', 'Correspondent Collection'),
    363: ('CR', 'detail', 'Correspondent Collection Adjustment'),
    364: ('CR', 'detail', 'Loan Participation'),
    366: ('CR', 'detail', 'Currency and Coin Deposited'),
    367: ('CR', 'detail', 'Food Stamp Letter'),
    368: ('CR', 'detail', 'Food Stamp Adjustment'),
    369: ('CR', 'detail', 'Clearing Settlement Credit'),
    370: ('CR', 'summary', 'Total Back Value Credits'),
    372: ('CR', 'detail', 'Back Value Adjustment'),
    373: ('CR', 'detail', 'Customer Payroll'),
    374: ('CR', 'detail', 'FRB Statement Recap'),
    376: ('CR', 'detail', 'Savings Bond Letter or Adjustment'),
    377: ('CR', 'detail', 'Treasury Tax and Loan Credit'),
    378: ('CR', 'detail', 'Transfer of Treasury Credit'),
    379: ('CR', 'detail', 'FRB Government Checks Cash Letter Credit'),
    381: ('CR', 'detail', 'FRB Government Check Adjustment'),
    382: ('CR', 'detail', 'FRB Postal Money Order Credit'),
    383: ('CR', 'detail', 'FRB Postal Money Order Adjustment'),
    384: ('CR', 'detail', 'FRB Cash Letter Auto Charge Credit'),
    385: ('CR', 'summary', 'Total Universal Credits'),
    386: ('CR', 'detail', 'FRB Cash Letter Auto Charge Adjustment'),
    387: ('CR', 'detail', 'FRB Fine-Sort Cash Letter Credit'),
    388: ('CR', 'detail', 'FRB Fine-Sort Adjustment'),
    389: ('CR', 'summary', 'Total Freight Payment Credits'),
    390: ('CR', 'summary', 'Total Miscellaneous Credits'),
    391: ('CR', 'detail', 'Universal Credit'),
    392: ('CR', 'detail', 'Freight Payment Credit'),
    393: ('CR', 'detail', 'Itemized Credit Over $10,000'),
    394: ('CR', 'detail', 'Cumulative Credits'),
    395: ('CR', 'detail', 'Check Reversal'),
    397: ('CR', 'detail', 'Float Adjustment'),
    398: ('CR', 'detail', 'Miscellaneous Fee Refund'),
    399: ('CR', 'detail', 'Miscellaneous Credit'),
    400: ('DB', 'summary', 'Total Debits'),
    401: ('DB', 'summary', 'Total Debit Amount MTD'),
    403: ('DB', 'summary', "Today's Total Debits"),
    405: ('DB', 'summary', 'Total Debit Less Wire Transfers and Charge-Backs'),
    406: ('DB', 'summary', 'Debits not Detailed'),
    408: ('DB', 'detail', 'Float Adjustment'),
    409: ('DB', 'detail', 'Debit (Any Type)'),
    410: ('DB', 'summary', 'Total YTD Adjustment'),
    412: ('DB', 'summary', 'Total Debits (Excluding Returned Items)'),
    415: ('DB', 'detail', 'Lockbox Debit'),
    416: ('DB', 'summary', 'Total Lockbox Debits'),
    420: ('DB', 'summary', 'EDI Transaction Debits'),
    421: ('DB', 'detail', 'EDI Transaction Debit'),
    422: ('DB', 'detail', 'EDIBANX Settlement Debit'),
    423: ('DB', 'detail', 'EDIBANX Return Item Debit'),
    430: ('DB', 'summary', 'Total Payable-Through Drafts'),
    435: ('DB', 'detail', 'Payable-Through Draft'),
    445: ('DB', 'detail', 'ACH Concentration Debit'),
    446: ('DB', 'summary', 'Total ACH Disbursement Funding Debits'),
    447: ('DB', 'detail', 'ACH Disbursement Funding Debit'),
    450: ('DB', 'summary', 'Total ACH Debits'),
    451: ('DB', 'detail', 'ACH Debit Received'),
    452: ('DB', 'detail', 'Item in ACH Disbursement or Debit'),
    455: ('DB', 'detail', 'Preauthorized ACH Debit'),
    462: ('DB', 'detail', 'Account Holder Initiated ACH Debit'),
    463: ('DB', 'summary', 'Corporate Trade Payment Debits'),
    464: ('DB', 'detail', 'Corporate Trade Payment Debit'),
    465: ('DB', 'summary', 'Corporate Trade Payment Settlement'),
    466: ('DB', 'detail', 'ACH Settlement'),
    467: ('DB', 'summary', 'ACH Settlement Debits'),
    468: ('DB', 'detail', 'ACH Return Item or Adjustment Settlement'),
    469: ('DB', 'detail', 'Miscellaneous ACH Debit'),
    470: ('DB', 'summary', 'Total Check Paid'),
    471: ('DB', 'summary', 'Total Check Paid - Cumulative MTD'),
    472: ('DB', 'detail', 'Cumulative Checks Paid'),
    474: ('DB', 'detail', 'Certified Check Debit'),
    475: ('DB', 'detail', 'Check Paid'),
    476: ('DB', 'detail', 'Federal Reserve Bank Letter Debit'),
    477: ('DB', 'detail', 'Bank Originated Debit'),
    478: ('DB', 'summary', 'List Post Debits'),
    479: ('DB', 'detail', 'List Post Debit'),
    480: ('DB', 'summary', 'Total Loan Payments'),
    481: ('DB', 'detail', 'Individual Loan Payment'),
    482: ('DB', 'summary', 'Total Bank-Originated Debits'),
    484: ('DB', 'detail', 'Draft'),
    485: ('DB', 'detail', 'DTC Debit'),
    486: ('DB', 'summary', 'Total Cash Letter Debits'),
    487: ('DB', 'detail', 'Cash Letter Debit'),
    489: ('DB', 'detail', 'Cash Letter Adjustment'),
    490: ('DB', 'summary', 'Total Outgoing Money Transfers'),
    491: ('DB', 'detail', 'Individual Outgoing Internal Money Transfer'),
    493: ('DB', 'detail', 'Customer Terminal Initiated Money Transfer'),
    495: ('DB', 'detail', 'Outgoing Money Transfer'),
    496: ('DB', 'detail', 'Money Transfer Adjustment'),
    498: ('DB', 'detail', 'Compensation'),
    500: ('DB', 'summary', 'Total Automatic Transfer Debits'),
    501: ('DB', 'detail', 'Individual Automatic Transfer Debit'),
    502: ('DB', 'detail', 'Bond Operations Debit'),
    505: ('DB', 'summary', 'Total Book Transfer Debits'),
    506: ('DB', 'detail', 'Book Transfer Debit'),
    507: ('DB', 'summary', 'Total International Money Transfer Debits'),
    508: ('DB', 'detail', 'Individual International Money Transfer Debit'),
    510: ('DB', 'summary', 'Total International Debits'),
    512: ('DB', 'detail', 'Letter of Credit Debit'),
    513: ('DB', 'detail', 'Letter of Credit'),
    514: ('DB', 'detail', 'Foreign Exchange Debit'),
    515: ('DB', 'summary', 'Total Letters of Credit'),
    516: ('DB', 'detail', 'Foreign Remittance Debit'),
    518: ('DB', 'detail', 'Foreign Collection Debit'),
    522: ('DB', 'detail', 'Foreign Checks Paid'),
    524: ('DB', 'detail', 'Commission'),
    526: ('DB', 'detail', 'International Money Market Trading'),
    527: ('DB', 'detail', 'Standing Order'),
    529: ('DB', 'detail', 'Miscellaneous International Debit'),
    530: ('DB', 'summary', 'Total Security Debits'),
    531: ('DB', 'detail', 'Securities Purchased'),
    532: ('DB', 'summary', 'Total Amount of Securities Purchased'),
    533: ('DB', 'detail', 'Security Collection Debit'),
    534: ('DB', 'summary', 'Total Miscellaneous Securities DB - FF'),
    535: ('DB', 'detail', 'Purchase of Equity Securities'),
    536: ('DB', 'summary', 'Total Miscellaneous Securities Debit - CHF'),
    537: ('DB', 'summary', 'Total Collection Debit'),
    538: ('DB', 'detail', 'Matured Repurchase Order'),
    539: ('DB', 'summary', "Total Bankers' Acceptances Debit"),
    540: ('DB', 'detail', 'Coupon Collection Debit'),
    541: ('DB', 'detail', "Bankers' Acceptances"),
    542: ('DB', 'detail', 'Purchase of Debt Securities'),
    543: ('DB', 'detail', 'Domestic Collection'),
    544: ('DB', 'detail', 'Interest/Matured Principal Payment'),
    546: ('DB', 'detail', 'Commercial paper'),
    547: ('DB', 'detail', 'Capital Change'),
    548: ('DB', 'detail', 'Savings Bonds Sales Adjustment'),
    549: ('DB', 'detail', 'Miscellaneous Security Debit'),
    550: ('DB', 'summary', 'Total Deposited Items Returned'),
    551: ('DB', 'summary', 'Total Credit Reversals'),
    552: ('DB', 'detail', 'Credit Reversal'),
    554: ('DB', 'detail', 'Posting Error Correction Debit'),
    555: ('DB', 'detail', 'Deposited Item Returned'),
    556: ('DB', 'summary', 'Total ACH Return Items'),
    557: ('DB', 'detail', 'Individual ACH Return Item'),
    558: ('DB', 'detail', 'ACH Reversal Debit'),
    560: ('DB', 'summary', 'Total Rejected Debits'),
    561: ('DB', 'detail', 'Individual Rejected Debit'),
    563: ('DB', 'detail', 'Overdraft'),
    564: ('DB', 'detail', 'Overdraft Fee'),
    566: ('DB', 'detail', 'Return Item'),
    567: ('DB', 'detail', 'Return Item Fee'),
    568: ('DB', 'detail', 'Return Item Adjustment'),
    570: ('DB', 'summary', 'Total ZBA Debits'),
    571: ('DB', 'detail', 'ZBA Debit'),
    574: ('DB', 'detail', 'Cumulative ZBA Debits'),
    575: ('DB', 'detail', 'ZBA Debit Transfer'),
    576: ('DB', 'detail', 'ZBA Float Adjustment'),
    577: ('DB', 'detail', 'Controlled Disbursing Debit'),
    578: ('DB', 'detail', 'ZBA Debit Adjustment'),
    580: ('DB', 'summary', 'Total Controlled Disbursing Debits'),
    581: ('DB', 'detail', 'Individual Controlled Disbursing Debit'),
    583: ('DB', 'summary', 'Total Disbursing Checks Paid - Early Amount'),
    584: ('DB', 'summary', 'Total Disbursing Checks Paid - Later Amount'),
    585: ('DB', 'summary', 'Disbursing Funding Requirement'),
    586: ('DB', 'summary', 'FRB Presentment Estimate (Fed Estimate)'),
    587: ('DB', 'summary', 'Late Debits (After Notification)'),
    588: ('DB', 'summary', 'Total Disbursing Checks Paid - Last Amount'),
    590: ('DB', 'summary', 'Total DTC Debits'),
    594: ('DB', 'summary', 'Total ATM Debits'),
    595: ('DB', 'detail', 'ATM Debit'),
    596: ('DB', 'summary', 'Total APR Debits'),
    597: ('DB', 'detail', 'ARP Debit'),
    601: ('DB', 'summary', 'Estimated Total Disbursement'),
    602: ('DB', 'summary', 'Adjusted Total Disbursement'),
    610: ('DB', 'summary', 'Total Funds Required'),
    611: ('DB', 'summary', 'Total Wire Transfers Out - CHF'),
    612: ('DB', 'summary', 'Total Wire Transfers Out - FF'),
    613: ('DB', 'summary', 'Total International Debit - CHF'),
    614: ('DB', 'summary', 'Total International Debit - FF'),
    615: ('DB', 'summary', 'Total Federal Reserve Bank - Commercial Bank Debit'),
    616: ('DB', 'detail', 'Federal Reserve Bank - Commercial Bank Debit'),
    617: ('DB', 'summary', 'Total Securities Purchased - CHF'),
    618: ('DB', 'summary', 'Total Securities Purchased - FF'),
    621: ('DB', 'summary', 'Total Broker Debits - CHF'),
    622: ('DB', 'detail', 'Broker Debit'),
    623: ('DB', 'summary', 'Total Broker Debits - FF'),
    625: ('DB', 'summary', 'Total Broker Debits'),
    626: ('DB', 'summary', 'Total Fed Funds Purchased'),
    627: ('DB', 'detail', 'Fed Funds Purchased'),
    628: ('DB', 'summary', 'Total Cash Center Debits'),
    629: ('DB', 'detail', 'Cash Center Debit'),
    630: ('DB', 'summary', 'Total Debit Adjustments'),
    631: ('DB', 'detail', 'Debit Adjustment'),
    632: ('DB', 'summary', 'Total Trust Debits'),
    633: ('DB', 'detail', 'Trust Debit'),
    634: ('DB', 'detail', 'YTD Adjustment Debit'),
    640: ('DB', 'summary', 'Total Escrow Debits'),
    641: ('DB', 'detail', 'Individual Escrow Debit'),
    644: ('DB', 'detail', 'Individual Back Value Debit'),
    646: ('DB', 'summary', 'Transfer Calculation Debit'),
    650: ('DB', 'summary', 'Investments Purchased'),
    651: ('DB', 'detail', 'Individual Investment Purchased'),
    654: ('DB', 'detail', 'Interest Debit'),
    655: ('DB', 'summary', 'Total Investment Interest Debits'),
    656: ('DB', 'detail', 'Sweep Principal Buy'),
    657: ('DB', 'detail', 'Futures Debit'),
    658: ('DB', 'detail', 'Principal Payments Debit'),
    659: ('DB', 'detail', 'Interest Adjustment Debit'),
    661: ('DB', 'detail', 'Account Analysis Fee'),
    662: ('DB', 'detail', 'Correspondent Collection Debit'),
    663: ('DB', 'detail', 'Correspondent Collection Adjustment'),
    664: ('DB', 'detail', 'Loan Participation'),
    665: ('DB', 'summary', 'Intercept Debits'),
    666: ('DB', 'detail', 'Currency and Coin Shipped'),
    667: ('DB', 'detail', 'Food Stamp Letter'),
    668: ('DB', 'detail', 'Food Stamp Adjustment'),
    669: ('DB', 'detail', 'Clearing Settlement Debit'),
    670: ('DB', 'summary', 'Total Back Value Debits'),
    672: ('DB', 'detail', 'Back Value Adjustment'),
    673: ('DB', 'detail', 'Customer Payroll'),
    674: ('DB', 'detail', 'FRB Statement Recap'),
    676: ('DB', 'detail', 'Savings Bond Letter or Adjustment'),
    677: ('DB', 'detail', 'Treasury Tax and Loan Debit'),
    678: ('DB', 'detail', 'Transfer of Treasury Debit'),
    679: ('DB', 'detail', 'FRB Government Checks Cash Letter Debit'),
    681: ('DB', 'detail', 'FRB Government Check Adjustment'),
    682: ('DB', 'detail', 'FRB Postal Money Order Debit'),
    683: ('DB', 'detail', 'FRB Postal Money Order Adjustment'),
    684: ('DB', 'detail', 'FRB Cash Letter Auto Charge Debit'),
    685: ('DB', 'summary', 'Total Universal Debits'),
    686: ('DB', 'detail', 'FRB Cash Letter Auto Charge Adjustment'),
    687: ('DB', 'detail', 'FRB Fine-Sort Cash Letter Debit'),
    688: ('DB', 'detail', 'FRB Fine-Sort Adjustment'),
    689: ('DB', 'summary', 'FRB Freight Payment Debits'),
    690: ('DB', 'summary', 'Total Miscellaneous Debits'),
    691: ('DB', 'detail', 'Universal Debit'),
    692: ('DB', 'detail', 'Freight Payment Debit'),
    693: ('DB', 'detail', 'Itemized Debit Over $10,000'),
    694: ('DB', 'detail', 'Deposit Reversal'),
    695: ('DB', 'detail', 'Deposit Correction Debit'),
    696: ('DB', 'detail', 'Regular Collection Debit'),
    697: ('DB', 'detail', 'Cumulative Debits'),
    698: ('DB', 'detail', 'Miscellaneous Fees'),
    699: ('DB', 'detail', 'Miscellaneous Debit'),
    # Loan status and detail
    701: ('NA', 'status', 'Principal Loan Balance'),
    703: ('NA', 'status', 'Available Commitment Amount'),
    705: ('NA', 'status', 'Payment Amount Due'),
    707: ('NA', 'status', 'Principal Amount Past Due'),
    709: ('NA', 'status', 'Interest Amount Past Due'),
    720: ('CR', 'summary', 'Loan Payment'),
    721: ('CR', 'detail', 'Amount Applied to Interest'),
    722: ('CR', 'detail', 'Amount Applied to Principal'),
    723: ('CR', 'detail', 'Amount Applied to Escrow'),
    724: ('CR', 'detail', 'Amount Applied to Late Charges'),
    725: ('CR', 'detail', 'Amount Applied to Buydown'),
    726: ('CR', 'detail', 'Amount Applied to Misc. Fees'),
    727: ('CR', 'detail', 'Amount Applied to Deferred Interest Detail'),
    728: ('CR', 'detail', 'Amount Applied to Service Charge'),
    760: ('DB', 'summary', 'Loan Disbursement'),
    890: ('NA', 'detail', 'Contains Non-monetary Information'),
    }
