"""
covid_reports package marker.
"""
