"""
TXF (Tax Exchange Format) V042 tags used by this converter.

Each line of a TXF file starts with a one-character tag followed by its value:

    V042                 format version (header)
    A<application>       exporting application (header)
    D<MM/DD/YYYY>        export date (header)
    TD                   record type: detail record
    N<refnum>            tax category reference number
    C<copy>              copy number
    L<line>              line number
    $<amount>            signed amount, two decimals
    X<detail>            free-text detail
    ^                    end of record
"""

from typing import Final

CRLF: Final[str] = "\r\n"
TXF_VERSION: Final[str] = "V042"
APPLICATION_NAME: Final[str] = "csv-to-txf"

TAG_APPLICATION: Final[str] = "A"
TAG_EXPORT_DATE: Final[str] = "D"
TAG_DETAIL_RECORD: Final[str] = "TD"
TAG_REFNUM: Final[str] = "N"
TAG_COPY: Final[str] = "C"
TAG_LINE: Final[str] = "L"
TAG_AMOUNT: Final[str] = "$"
TAG_DETAIL: Final[str] = "X"
TAG_END_OF_RECORD: Final[str] = "^"

# Schedule A, cash contributions to charity.
REFNUM_CASH_CHARITY: Final[int] = 280
