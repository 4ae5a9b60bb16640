import numpy as np
import matplotlib.pyplot as plt
from pybtps.io.reference_table import BTPSReferenceTable
from pybtps.correction.factor import get_btps_factor

# Load the bundled BTPS reference table (20–37 °C, 760 mmHg)
table = BTPSReferenceTable.default()
print(table)

# Tabulated temperature: stored factor
print(f"Factor at 20.0 °C: {get_btps_factor(20)}")

# Non-tabulated temperatures: OLS regression over the whole table
query = np.array([20.5, 24.3, 38.0])
predicted = [get_btps_factor(t) for t in query]
for t, f in zip(query, predicted):
    print(f"Factor at {t:.1f} °C: {f:.4f}")

# Plot table and fitted line, overlaying the predicted points
table.plot(show=False)
plt.scatter(query, predicted, facecolors='none', edgecolors='black', s=80,
            label="Predicted factors")
plt.legend()
plt.tight_layout()
plt.show()
