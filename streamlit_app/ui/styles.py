"""
Global CSS Styling for Foodie Find.

This module provides load_global_styles() to inject consistent styling
across the app. Focuses on typography, spacing, recipe cards and filter badges.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Foodie Find app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Sets global styles for headings, buttons and cards
    - Styles recipe cards, diet pills and the footer
    - Keeps content width readable on large screens
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        h1 {
            font-size: 2.25rem !important;
            margin-bottom: 0.5rem !important;
        }

        h3 {
            font-size: 1.35rem !important;
        }

        /* Buttons - rounded pills */
        .stButton > button {
            border-radius: 50px !important;
            box-shadow: 0 2px 6px rgba(230, 94, 37, 0.12) !important;
            transition: all 0.2s ease !important;
            font-weight: 600 !important;
        }

        .stButton > button:hover {
            box-shadow: 0 3px 10px rgba(230, 94, 37, 0.25) !important;
            transform: translateY(-1px) !important;
        }

        .main .block-container {
            max-width: 1200px !important;
            padding-top: 1.5rem !important;
            padding-bottom: 2.5rem !important;
        }

        /* Page header */
        .ff-page-header .subtitle {
            color: #666 !important;
            font-size: 1rem !important;
        }

        /* Section */
        .ff-section-caption {
            color: #666 !important;
            font-size: 0.9rem !important;
            margin-bottom: 0.75rem !important;
        }

        /* Recipe card */
        .ff-card-title {
            font-weight: 700 !important;
            font-size: 1.05rem !important;
            line-height: 1.3 !important;
            min-height: 2.6em;
        }

        .ff-card-meta {
            color: #666;
            font-size: 0.85rem;
        }

        /* Skeleton placeholder shown while results load */
        .ff-skeleton {
            height: 180px;
            border-radius: 12px;
            background: linear-gradient(90deg, #f3ece6 25%, #faf6f2 50%, #f3ece6 75%);
            background-size: 200% 100%;
            animation: ff-shimmer 1.4s infinite;
            margin-bottom: 0.75rem;
        }

        .ff-skeleton--line {
            height: 14px;
            width: 70%;
        }

        @keyframes ff-shimmer {
            0% { background-position: 200% 0; }
            100% { background-position: -200% 0; }
        }

        /* Pill tags (diet badges) */
        .ff-pill {
            display: inline-block;
            padding: 0.2rem 0.65rem;
            border-radius: 50px;
            background: #FDEDE4;
            color: #C24E1C;
            font-size: 0.75rem;
            font-weight: 600;
            margin: 0 0.25rem 0.25rem 0;
        }

        /* Footer */
        .ff-footer {
            margin-top: 2rem !important;
            padding: 1.25rem 0 !important;
            border-top: 1px solid rgba(230, 94, 37, 0.2) !important;
            text-align: center !important;
            color: #777 !important;
            font-size: 0.85rem !important;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
