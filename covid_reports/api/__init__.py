"""
covid_reports/api package marker.
"""
