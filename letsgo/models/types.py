from sqlalchemy import Numeric

# Money is stored with sub-cent precision, rounding happens on output.
Money = Numeric(14, 6, asdecimal=True)
