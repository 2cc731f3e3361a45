"""
covid_reports/utils package marker.
"""
