from pybtps.spirometry import MeasurementSet, convert, lung_vol_atps_btps
from pybtps.errors import InvalidMeasurement

# Full set of measurements
report = lung_vol_atps_btps(FEV1=5, FVC=10, PEF=4, TV=9, IC=10, EC=12, VC=10)
report.display()

# Partial data from a dictionary (e.g. one row of a spreadsheet)
partial = MeasurementSet.from_dict({"FEV1": 3.1, "FVC": 4.2, "TV": 0.55})
df = convert(partial).to_dataframe()
print(df)

# Inconsistent volumes are rejected
try:
    lung_vol_atps_btps(TV=10, IC=5, VC=20)
except InvalidMeasurement as exc:
    print(f"Rejected: {exc}")
