import streamlit as st

st.set_page_config(page_title="Methodology", layout="wide")
st.title("Methodology")

st.markdown(
    r"""
### Aggregation (per 30-minute interval)

- Volume: sum over every day in the range.
- AHT: simple mean over days with volume > 0 (planned AHT if none).
- Roster: sum of all shift cells in the interval row.
- Intervals with no volume and no rostered agents are not shown.

### Shrinkage chain

\[
\text{effective} = \text{raw}\cdot(1-\tfrac{OOO}{100})\cdot(1-\tfrac{IO}{100})\cdot(1-\tfrac{BB}{100})
\]

Applied to both volume (effective volume) and rostered agents (actual agents).

### Erlang C

- Traffic intensity (Erlangs):
  \[
  A = \frac{\text{effective volume} \cdot \text{AHT}}{3600}
  \]

- Probability of wait:
  \[
  P(W>0) = \frac{\frac{A^N}{N!}\cdot\frac{N}{N-A}}{\sum_{k=0}^{N-1}\frac{A^k}{k!} + \frac{A^N}{N!}\cdot\frac{N}{N-A}}
  \]

- Service Level at threshold \(T\):
  \[
  SL(T)=1 - P(W>0)\cdot e^{-(N-A)\cdot(T/AHT)}
  \]

- Occupancy: \(A / N\), capped at 100%.

### Interval metrics

- **Requirement**: minimum whole \(N > A\) with \(SL(T) \ge\) target.
- **Variance**: actual agents − requirement.
- **Call trend**: effective volume ÷ raw volume × 100.
- **Influx**: effective volume ÷ 0.5 h.
- **Agent ratio**: actual agents ÷ total rostered agents × 100.

Fractional actual agents are evaluated as whole servers in the Erlang-C formulas.
The *workload* method is the earlier linear sheet: staff hours ÷ productive hours per agent.
"""
)
