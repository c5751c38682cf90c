from dataclasses import asdict

import pandas as pd
import plotly.express as px
import streamlit as st

from Modules.theme_config import CUSTOM_THEME


def records_to_df(movies):
    """Movie records to a DataFrame, keeping the columns even for an empty list"""
    columns = ["id", "title", "status", "rating", "review", "image_url"]
    return pd.DataFrame([asdict(m) for m in movies], columns=columns) if movies else pd.DataFrame(columns=columns)


def safe_bar_chart(df, index_col, value_col, title="", theme=CUSTOM_THEME):
    """Bar chart using a consistent custom theme"""
    if not df.empty and index_col in df.columns and value_col in df.columns and df[value_col].sum() > 0:
        if title:
            st.subheader(title)

        df_plot = df.copy()
        df_plot[index_col] = df_plot[index_col].astype(str)  # categorical axis

        fig = px.bar(
            df_plot,
            x=index_col,
            y=value_col,
            text=value_col,
            color=index_col,
            color_discrete_sequence=theme["color_sequence"],
            labels={index_col: index_col.capitalize(), value_col: value_col.capitalize()},
            template=theme["template"]
        )

        fig.update_traces(textposition="outside")
        fig.update_xaxes(
            title_font=dict(color=theme["axis_color"]),
            tickfont=dict(color=theme["axis_color"])
        )
        fig.update_yaxes(
            title_font=dict(color=theme["axis_color"]),
            tickfont=dict(color=theme["axis_color"])
        )
        fig.update_layout(
            font=dict(family=theme["font_family"], color=theme["font_color"]),
            showlegend=False,
            margin=dict(l=20, r=20, t=20, b=40),
            height=300
        )

        st.plotly_chart(fig, width="stretch")
    else:
        st.info(f"No data available for {(title or value_col).lower()}.")


def safe_metric(label, value, decimals=2):
    """Prints a metric, handling None safely"""
    if value is None:
        st.metric(label, "N/A")
    elif isinstance(value, float):
        st.metric(label, round(value, decimals))
    else:
        st.metric(label, value)


def safe_pie_chart(df, names_col, values_col, title="", theme=CUSTOM_THEME):
    if not df.empty and names_col in df.columns and values_col in df.columns:
        if title:
            st.subheader(title)
        fig = px.pie(
            df,
            names=names_col,
            values=values_col,
            color_discrete_sequence=theme["color_sequence"],
            template=theme["template"]
        )
        fig.update_traces(textinfo='percent+label', pull=[0.05] * len(df))
        fig.update_layout(showlegend=False, margin=dict(l=20, r=20, t=20, b=20), height=300)
        st.plotly_chart(fig, width="stretch")
    else:
        st.info(f"No data available for {(title or names_col).lower()}.")
