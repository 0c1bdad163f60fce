"""Countries offered in the citizenship and destination pickers."""

from typing import List

from .models import Country


COUNTRIES: List[Country] = [
    Country(code="AE", name="United Arab Emirates", region="Middle East"),
    Country(code="AR", name="Argentina", region="South America"),
    Country(code="AT", name="Austria", region="Europe"),
    Country(code="AU", name="Australia", region="Oceania"),
    Country(code="BE", name="Belgium", region="Europe"),
    Country(code="BR", name="Brazil", region="South America"),
    Country(code="CA", name="Canada", region="North America"),
    Country(code="CH", name="Switzerland", region="Europe"),
    Country(code="CL", name="Chile", region="South America"),
    Country(code="CN", name="China", region="Asia"),
    Country(code="CO", name="Colombia", region="South America"),
    Country(code="CZ", name="Czechia", region="Europe"),
    Country(code="DE", name="Germany", region="Europe"),
    Country(code="DK", name="Denmark", region="Europe"),
    Country(code="EG", name="Egypt", region="Africa"),
    Country(code="ES", name="Spain", region="Europe"),
    Country(code="FI", name="Finland", region="Europe"),
    Country(code="FR", name="France", region="Europe"),
    Country(code="GB", name="United Kingdom", region="Europe"),
    Country(code="GR", name="Greece", region="Europe"),
    Country(code="HK", name="Hong Kong", region="Asia"),
    Country(code="ID", name="Indonesia", region="Asia"),
    Country(code="IE", name="Ireland", region="Europe"),
    Country(code="IL", name="Israel", region="Middle East"),
    Country(code="IN", name="India", region="Asia"),
    Country(code="IS", name="Iceland", region="Europe"),
    Country(code="IT", name="Italy", region="Europe"),
    Country(code="JP", name="Japan", region="Asia"),
    Country(code="KE", name="Kenya", region="Africa"),
    Country(code="KR", name="South Korea", region="Asia"),
    Country(code="MA", name="Morocco", region="Africa"),
    Country(code="MX", name="Mexico", region="North America"),
    Country(code="MY", name="Malaysia", region="Asia"),
    Country(code="NG", name="Nigeria", region="Africa"),
    Country(code="NL", name="Netherlands", region="Europe"),
    Country(code="NO", name="Norway", region="Europe"),
    Country(code="NZ", name="New Zealand", region="Oceania"),
    Country(code="PE", name="Peru", region="South America"),
    Country(code="PH", name="Philippines", region="Asia"),
    Country(code="PK", name="Pakistan", region="Asia"),
    Country(code="PL", name="Poland", region="Europe"),
    Country(code="PT", name="Portugal", region="Europe"),
    Country(code="QA", name="Qatar", region="Middle East"),
    Country(code="RU", name="Russia", region="Europe"),
    Country(code="SA", name="Saudi Arabia", region="Middle East"),
    Country(code="SE", name="Sweden", region="Europe"),
    Country(code="SG", name="Singapore", region="Asia"),
    Country(code="TH", name="Thailand", region="Asia"),
    Country(code="TR", name="Turkey", region="Europe"),
    Country(code="TW", name="Taiwan", region="Asia"),
    Country(code="UA", name="Ukraine", region="Europe"),
    Country(code="US", name="United States", region="North America"),
    Country(code="VN", name="Vietnam", region="Asia"),
    Country(code="XK", name="Kosovo", region="Europe"),
    Country(code="ZA", name="South Africa", region="Africa"),
]
