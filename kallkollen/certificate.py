"""Generate the self-contained HTML certificate (print-friendly for Save as PDF)."""

import datetime
import html

DEFAULT_NAME = "Deltagare"

SWEDISH_MONTHS = (
    "januari", "februari", "mars", "april", "maj", "juni",
    "juli", "augusti", "september", "oktober", "november", "december",
)


def format_swedish_date(date: datetime.date) -> str:
    """Long Swedish date, e.g. '19 oktober 2026'."""
    return f"{date.day} {SWEDISH_MONTHS[date.month - 1]} {date.year}"


def generate_certificate_html(score: int, profile: str, name: str, date: datetime.date) -> str:
    """
    Build a single A4 certificate page. Output depends only on the arguments,
    so the same progress, name and date always give the same document.
    """
    name_html = html.escape(name or DEFAULT_NAME)
    profile_html = html.escape(profile)
    date_html = html.escape(format_swedish_date(date))

    return f"""<!DOCTYPE html>
<html lang="sv">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Diplom – Källkollen</title>
<style>
* {{ box-sizing: border-box; }}
@page {{ size: A4; margin: 0; }}
body {{
  font-family: Georgia, "Times New Roman", serif;
  color: #0f172a;
  margin: 0;
  background: #fff;
}}
.page {{
  width: 210mm;
  min-height: 297mm;
  margin: 0 auto;
  padding: 12mm;
  border: 20px double #312e81;
  display: flex;
  flex-direction: column;
}}
.inner {{
  border: 4px solid #e0e7ff;
  padding: 2rem;
  flex-grow: 1;
  display: flex;
  flex-direction: column;
  align-items: center;
  text-align: center;
}}
.icon {{ font-size: 3.5rem; margin-bottom: 1.5rem; }}
h1 {{
  font-size: 3rem;
  letter-spacing: 0.3em;
  text-transform: uppercase;
  color: #312e81;
  margin: 0 0 0.5rem;
}}
.subtitle {{
  font-family: -apple-system, "Segoe UI", Roboto, Arial, sans-serif;
  text-transform: uppercase;
  color: #64748b;
  margin-bottom: 3rem;
}}
.certify {{ font-size: 1.5rem; font-style: italic; margin-bottom: 1rem; }}
.name {{
  font-family: -apple-system, "Segoe UI", Roboto, Arial, sans-serif;
  font-size: 3rem;
  font-weight: 900;
  border-bottom: 4px solid #1e293b;
  padding: 0 3rem 0.5rem;
  margin-bottom: 3rem;
}}
.body-text {{ font-size: 1.2rem; max-width: 36rem; line-height: 1.6; margin-bottom: 3rem; }}
.stats {{
  display: flex;
  gap: 3rem;
  font-family: -apple-system, "Segoe UI", Roboto, Arial, sans-serif;
  margin-bottom: 3rem;
}}
.stat {{ background: #f8fafc; border-radius: 1rem; padding: 1.5rem 2.5rem; }}
.stat-label {{ font-size: 0.75rem; text-transform: uppercase; color: #94a3b8; font-weight: 700; }}
.stat-value {{ font-size: 2.25rem; font-weight: 900; color: #312e81; }}
.footer {{
  margin-top: auto;
  width: 100%;
  display: flex;
  justify-content: space-between;
  align-items: flex-end;
  border-top: 1px solid #e2e8f0;
  padding-top: 2rem;
  font-family: -apple-system, "Segoe UI", Roboto, Arial, sans-serif;
  font-size: 0.9rem;
}}
.footer-label {{ font-weight: 700; color: #94a3b8; text-transform: uppercase; letter-spacing: 0.1em; }}
.footer-date {{ font-size: 1.1rem; font-weight: 700; text-align: left; }}
.seal {{ font-size: 2.5rem; text-align: right; }}

@media print {{
  .page {{ margin: 0; }}
}}
</style>
</head>
<body>
<div class="page">
<div class="inner">
  <div class="icon">🧠</div>
  <h1>Diplom</h1>
  <p class="subtitle">I Källkritiskt Tänkande &amp; Digital Medvetenhet</p>

  <p class="certify">Härmed intygas att</p>
  <p class="name">{name_html}</p>

  <p class="body-text">
    Har framgångsrikt genomfört utmaningarna i <strong>"Källkollen: Digital Samtid"</strong> och
    uppvisat förmåga att aktivera System 2, identifiera kognitiva biaser och genomskåda
    desinformation i en digital miljö.
  </p>

  <div class="stats">
    <div class="stat">
      <p class="stat-label">Totalpoäng</p>
      <p class="stat-value">{score}</p>
    </div>
    <div class="stat">
      <p class="stat-label">Kognitiv Profil</p>
      <p class="stat-value">{profile_html}</p>
    </div>
  </div>

  <div class="footer">
    <div>
      <p class="footer-label">Datum</p>
      <p class="footer-date">{date_html}</p>
    </div>
    <div>
      <p class="seal">🏅</p>
      <p class="footer-label"><em>Verifierad av Källkollen-AI</em></p>
    </div>
  </div>
</div>
</div>
</body>
</html>
"""
