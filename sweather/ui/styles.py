"""Custom CSS styling for the Sweather UI."""


def get_custom_css() -> str:
    """Generate custom CSS for the Sweather UI.

    Returns:
        CSS string to inject via st.markdown
    """
    return """
    <style>
    /* Main app styling */
    .main {
        padding: 1rem;
    }

    /* Weather summary card */
    .weather-card {
        border-radius: 16px;
        padding: 1.5rem 2rem;
        color: white;
        box-shadow: 0 8px 24px rgba(0,0,0,0.15);
        margin-bottom: 1rem;
    }

    .weather-card.sweater {
        background: linear-gradient(90deg, #fb923c, #d97706);
    }

    .weather-card.no-sweater {
        background: linear-gradient(90deg, #60a5fa, #4f46e5);
    }

    .weather-location {
        text-transform: uppercase;
        letter-spacing: 0.08em;
        font-size: 0.85rem;
        opacity: 0.85;
    }

    .weather-temperature {
        font-size: 2.5rem;
        font-weight: 700;
        margin: 0.25rem 0;
    }

    .weather-summary {
        font-size: 1.2rem;
        opacity: 0.9;
    }

    .verdict-box {
        background: rgba(255,255,255,0.2);
        border-radius: 12px;
        padding: 1rem;
        text-align: center;
    }

    .verdict-label {
        font-size: 0.8rem;
        text-transform: uppercase;
        letter-spacing: 0.08em;
        opacity: 0.8;
    }

    .verdict-value {
        font-size: 1.6rem;
        font-weight: 700;
    }

    .source-chip {
        display: inline-block;
        font-size: 0.7rem;
        background: rgba(255,255,255,0.2);
        color: white !important;
        padding: 0.15rem 0.5rem;
        border-radius: 999px;
        margin: 0.5rem 0.25rem 0 0;
        text-decoration: none;
    }

    /* Clothing cards */
    .insulation-badge {
        display: inline-block;
        padding: 0.15rem 0.5rem;
        border-radius: 999px;
        background: #f1f5f9;
        font-weight: 600;
        font-size: 0.8rem;
    }

    .tag-chip {
        display: inline-block;
        font-size: 0.65rem;
        text-transform: uppercase;
        letter-spacing: 0.05em;
        background: #f3f4f6;
        color: #4b5563;
        padding: 0.1rem 0.4rem;
        border-radius: 6px;
        margin: 0.1rem;
    }

    .selected-card {
        border: 2px solid #6366f1;
        border-radius: 12px;
        padding: 0.5rem;
        background: #eef2ff;
    }

    .no-image {
        background-color: #f0f0f0;
        padding: 4rem 2rem;
        text-align: center;
        border-radius: 8px;
        color: #999;
    }

    /* Empty states */
    .empty-state {
        text-align: center;
        padding: 3rem;
        color: #64748b;
    }
    </style>
    """
