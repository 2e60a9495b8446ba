"""Client, state and orchestration for the registration statistics dashboard.

The Streamlit page in ``dashboard`` only renders; everything that talks to the
Registration Statistics Service or decides when to refetch lives here.
"""
