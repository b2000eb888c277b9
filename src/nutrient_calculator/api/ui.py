"""Minimal browser UI that consumes the JSON API."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve the two-screen profile and ledger page."""
    return HTMLResponse(_INDEX_HTML)


_INDEX_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Nutrient Calculator</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; max-width: 800px;
             margin: 0 auto; padding: 2rem; }
      .card { border: 1px solid #ddd; border-radius: 6px; padding: 1rem;
              margin-bottom: 1rem; }
      .grid { display: grid; grid-template-columns: repeat(4, 1fr); gap: 0.5rem; }
      input, select { padding: 0.4rem 0.6rem; width: 100%; box-sizing: border-box; }
      button { padding: 0.5rem 0.8rem; margin-top: 1rem; width: 100%; }
      .over { color: #c62828; }
      .hidden { display: none; }
      #error { color: #c62828; }
    </style>
  </head>
  <body>
    <p id="error"></p>
    <div id="onboarding" class="card hidden">
      <h1>Nutrient calculator</h1>
      <div class="grid">
        <label>Age<input id="age" type="number" min="0" /></label>
        <label>Sex
          <select id="sex">
            <option value="male">Male</option>
            <option value="female">Female</option>
          </select>
        </label>
        <label>Weight (kg)<input id="weight_kg" type="number" min="0" /></label>
        <label>Height (cm)<input id="height_cm" type="number" min="0" /></label>
      </div>
      <label>Activity level<select id="activity_factor"></select></label>
      <button onclick="submitProfile()">Calculate</button>
    </div>
    <div id="tracking" class="hidden">
      <div class="card">
        <h2>Your daily target</h2>
        <div id="target" class="grid"></div>
      </div>
      <div class="card">
        <h3>Add a meal</h3>
        <div class="grid">
          <label>Calories<input id="m_calories" type="number" min="0" /></label>
          <label>Protein (g)<input id="m_protein_g" type="number" min="0" /></label>
          <label>Fat (g)<input id="m_fat_g" type="number" min="0" /></label>
          <label>Carbs (g)<input id="m_carbs_g" type="number" min="0" /></label>
        </div>
        <button onclick="addMeal()">Add</button>
      </div>
      <div class="card">
        <h3>Today's totals</h3>
        <div id="totals" class="grid"></div>
        <ul id="entries"></ul>
      </div>
    </div>
    <script>
      const FIELDS = [
        ['calories', 'Calories', ''], ['protein_g', 'Protein', 'g'],
        ['fat_g', 'Fat', 'g'], ['carbs_g', 'Carbs', 'g'],
      ];

      async function call(path, options) {
        const res = await fetch(path, options);
        const data = await res.json();
        if (!res.ok) {
          document.getElementById('error').textContent =
            typeof data.detail === 'string' ? data.detail : 'Request failed.';
          return null;
        }
        document.getElementById('error').textContent = '';
        return data;
      }

      function numberValue(id) {
        return Number(document.getElementById(id).value || 0);
      }

      async function load() {
        const levels = await call('/activity-levels');
        const select = document.getElementById('activity_factor');
        select.innerHTML = (levels || []).map(
          (level) => `<option value="${level.factor}">${level.label}</option>`
        ).join('');
        const profile = await call('/profile');
        if (profile && profile.state === 'tracking') {
          showTracking(profile.target);
        } else {
          document.getElementById('onboarding').classList.remove('hidden');
        }
      }

      async function submitProfile() {
        const body = {
          age: numberValue('age'),
          sex: document.getElementById('sex').value,
          weight_kg: numberValue('weight_kg'),
          height_cm: numberValue('height_cm'),
          activity_factor: numberValue('activity_factor'),
        };
        const data = await call('/profile', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(body),
        });
        if (data) showTracking(data.target);
      }

      function showTracking(target) {
        document.getElementById('onboarding').classList.add('hidden');
        document.getElementById('tracking').classList.remove('hidden');
        document.getElementById('target').innerHTML = FIELDS.map(
          ([key, label, unit]) => `<span>${label}: ${target[key]}${unit}</span>`
        ).join('');
        const source = new EventSource('/meals/stream');
        source.onmessage = (event) => render(JSON.parse(event.data), target);
      }

      function render(snapshot, target) {
        document.getElementById('error').textContent = snapshot.error || '';
        const over = snapshot.over_limit || {};
        document.getElementById('totals').innerHTML = FIELDS.map(
          ([key, label, unit]) =>
            `<span class="${over[key] ? 'over' : ''}">` +
            `${label}: ${snapshot.totals[key]} / ${target[key]}${unit}</span>`
        ).join('');
        document.getElementById('entries').innerHTML = snapshot.entries.map(
          (entry) =>
            `<li>${new Date(entry.occurred_at).toLocaleTimeString()}: ` +
            `${entry.calories} kcal ` +
            `<button onclick="deleteMeal('${entry.id}')">Delete</button></li>`
        ).join('');
      }

      async function addMeal() {
        const body = Object.fromEntries(
          FIELDS.map(([key]) => [key, numberValue('m_' + key)])
        );
        const data = await call('/meals', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(body),
        });
        if (data && data.status === 'ok') {
          FIELDS.forEach(([key]) => { document.getElementById('m_' + key).value = ''; });
        }
      }

      async function deleteMeal(id) {
        await call('/meals/' + id, { method: 'DELETE' });
      }

      load();
    </script>
  </body>
</html>
"""
