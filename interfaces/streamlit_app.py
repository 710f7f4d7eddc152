"""
Streamlit web interface for the statdist toolkit.

Interactive UI with tabs for:
- Density/mass and CDF plots of a chosen distribution
- Probability and quantile calculator
- Confidence intervals for a proportion or a mean
"""

import streamlit as st
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from statdist.core.binomial import dbinom, pbinom, qbinom
from statdist.core.chisquare import dchisq, pchisq, qchisq
from statdist.core.normal import dnorm, pnorm, qnorm
from statdist.core.poisson import dpois, ppois, qpois
from statdist.core.student import dt, pt, qt
from statdist.inference.intervals import mean_interval, proportion_interval

st.set_page_config(page_title="Statistical Distributions Explorer", layout="wide")

st.title("Statistical Distributions Explorer")
st.markdown("Density, distribution and quantile functions with elementary inference")

# Sidebar parameters
st.sidebar.header("Distribution")
family = st.sidebar.selectbox("Family", ["Normal", "Binomial", "Poisson", "Chi-square", "Student t"])

if family == "Normal":
    mu = st.sidebar.number_input("Mean (mu)", value=0.0)
    sigma = st.sidebar.number_input("Standard deviation (sigma)", value=1.0, min_value=0.01)
    discrete = False
    density = lambda x: dnorm(x, mu, sigma)
    cdf = lambda x: pnorm(x, mu, sigma)
    quantile = lambda p: qnorm(p, mu, sigma)
    support = (mu - 4 * sigma, mu + 4 * sigma)
elif family == "Binomial":
    n = st.sidebar.slider("Trials (n)", 1, 200, 20)
    prob = st.sidebar.slider("Success probability (p)", 0.0, 1.0, 0.5)
    discrete = True
    density = lambda k: dbinom(k, n, prob)
    cdf = lambda k: pbinom(k, n, prob)
    quantile = lambda p: qbinom(p, n, prob)
    support = (0, n)
elif family == "Poisson":
    lam = st.sidebar.number_input("Rate (lambda)", value=4.0, min_value=0.01)
    discrete = True
    density = lambda k: dpois(k, lam)
    cdf = lambda k: ppois(k, lam)
    quantile = lambda p: qpois(p, lam)
    support = (0, int(qpois(0.9999, lam)))
elif family == "Chi-square":
    df = st.sidebar.number_input("Degrees of freedom", value=4.0, min_value=0.1)
    discrete = False
    density = lambda x: dchisq(x, df)
    cdf = lambda x: pchisq(x, df)
    quantile = lambda p: qchisq(p, df)
    support = (qchisq(0.001, df), qchisq(0.999, df))
else:
    df = st.sidebar.number_input("Degrees of freedom", value=10.0, min_value=0.1)
    discrete = False
    density = lambda x: dt(x, df)
    cdf = lambda x: pt(x, df)
    quantile = lambda p: qt(p, df)
    support = (qt(0.005, df), qt(0.995, df))

# Main tabs
tab1, tab2, tab3 = st.tabs(["Density & CDF", "Probability Calculator", "Confidence Intervals"])

with tab1:
    st.header(f"{family} Distribution")

    if discrete:
        xs = np.arange(support[0], support[1] + 1)
    else:
        xs = np.linspace(support[0], support[1], 200)
    table = pd.DataFrame({
        "x": xs,
        "density": [density(x) for x in xs],
        "cdf": [cdf(x) for x in xs],
    })

    col1, col2 = st.columns(2)

    with col1:
        fig_density = go.Figure()
        if discrete:
            fig_density.add_trace(go.Bar(x=table["x"], y=table["density"], name="P(X = x)"))
        else:
            fig_density.add_trace(go.Scatter(x=table["x"], y=table["density"], name="f(x)"))
        fig_density.update_layout(title="Density" if not discrete else "Probability Mass",
                                  xaxis_title="x", yaxis_title="Density")
        st.plotly_chart(fig_density, use_container_width=True)

    with col2:
        fig_cdf = go.Figure()
        fig_cdf.add_trace(go.Scatter(x=table["x"], y=table["cdf"], name="F(x)",
                                     line=dict(color="orange", shape="hv" if discrete else "linear")))
        fig_cdf.update_layout(title="Cumulative Distribution", xaxis_title="x", yaxis_title="P(X <= x)")
        st.plotly_chart(fig_cdf, use_container_width=True)

    if discrete:
        st.subheader("Table")
        st.dataframe(table, use_container_width=True)

with tab2:
    st.header("Probability Calculator")

    col1, col2 = st.columns(2)

    with col1:
        x = st.number_input("Value x", value=float(quantile(0.5)))
        st.metric(label="P(X <= x)", value=f"{cdf(x):.6f}")
        st.metric(label="P(X > x)", value=f"{1.0 - cdf(x):.6f}")

    with col2:
        p = st.slider("Probability p", 0.001, 0.999, 0.95)
        st.metric(label=f"Quantile at p = {p:.3f}", value=f"{quantile(p):.6f}")

with tab3:
    st.header("Confidence Intervals")

    confidence = st.slider("Confidence level", 0.80, 0.99, 0.95)
    kind = st.radio("Parameter", ["Proportion", "Mean"], horizontal=True)

    try:
        if kind == "Proportion":
            trials = st.number_input("Trials", value=100, min_value=1, step=1)
            successes = st.number_input("Successes", value=50, min_value=0, step=1)
            ci = proportion_interval(int(successes), int(trials), confidence)
        else:
            xbar = st.number_input("Sample mean", value=0.0)
            s = st.number_input("Sample standard deviation", value=1.0, min_value=0.0)
            size = st.number_input("Sample size", value=30, min_value=2, step=1)
            ci = mean_interval(xbar, s, int(size), confidence)

        st.success(f"{confidence:.0%} interval: ({ci.lower:.4f}, {ci.upper:.4f})")
        st.info(f"Estimate: {ci.estimate:.4f} | Margin of error: {ci.margin_of_error:.4f} "
                f"| Critical value: {ci.critical_value:.4f}")
    except ValueError as e:
        st.error(f"Error: {e}")
