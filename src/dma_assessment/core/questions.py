"""Digital Maturity Assessment (DMA) v1 question bank.

Contains 11 diagnostic questions across 6 dimensions, modelled on the
EU/JRC digital maturity self-assessment. Multi-item questions use the
table encodings (one row per business area or technology) rather than
collapsing each table into a single answer.

Dimensions:
    digitalStrategy: digital business strategy and investment plans
    digitalReadiness: use of basic and advanced digital technologies
    humanCentric: skills and engagement of staff
    dataManagement: data handling, integration and cybersecurity
    automation: automation and artificial intelligence
    greenDigitalization: environmentally sustainable digitalisation

Weight convention: informational flags that indicate the absence of a
capability (e.g. 'data is not collected digitally') carry weight 0. They
neither add to the achievable maximum nor subtract from the score.
"""

from dma_assessment.core.models.assessment import (
    AssessmentSpec,
    CheckboxesQuestion,
    Dimension,
    Option,
    Question,
    Row,
    ScaleTableQuestion,
    TableDualCheckboxesQuestion,
    TriStateTableQuestion,
)

SCALE_LABELS: tuple[str, ...] = (
    "Not used",
    "Considering",
    "Prototyping",
    "Testing",
    "Implementing",
    "In use",
)

DIMENSIONS: tuple[Dimension, ...] = (
    Dimension(
        id="digitalStrategy",
        name="Digital Business Strategy",
        description="Digital business strategy and investment plans",
    ),
    Dimension(
        id="digitalReadiness",
        name="Digital Readiness",
        description="Use of basic and advanced digital technologies",
    ),
    Dimension(
        id="humanCentric",
        name="Human-Centric Digitalisation",
        description="Skills and engagement for digital technologies",
    ),
    Dimension(
        id="dataManagement",
        name="Data Management and Connectivity",
        description="Data handling, integration and cybersecurity",
    ),
    Dimension(
        id="automation",
        name="Automation and Artificial Intelligence",
        description="Automation and artificial intelligence",
    ),
    Dimension(
        id="greenDigitalization",
        name="Green Digitalisation",
        description="Sustainable digitalisation and environmental impact",
    ),
)

QUESTION_BANK: tuple[Question, ...] = (
    # -----------------------------------------------------------------------
    # Dimension: digitalStrategy (Q1-Q2)
    # -----------------------------------------------------------------------
    TableDualCheckboxesQuestion(
        id="Q1",
        dimension_id="digitalStrategy",
        title=(
            "In which business areas has your company already invested in "
            "digitalisation, and in which does it plan to invest?"
        ),
        rows=(
            Row("product-service-design", "Product/service design incl. R&D and innovation"),
            Row("project-planning", "Project planning and management"),
            Row("operations", "Operations (production, packaging, maintenance, services)"),
            Row("collaboration", "Collaboration with other sites or value-chain partners"),
            Row("inbound-logistics", "Inbound logistics and warehousing"),
            Row("marketing-sales", "Marketing, sales and customer service"),
            Row("delivery", "Delivery (outbound logistics, e-invoicing)"),
            Row("administration", "Administration and human resources"),
            Row("procurement", "Procurement and purchasing"),
            Row("security-compliance", "(Cyber)security and GDPR compliance"),
        ),
        left=Option("already-invested", "Already invested", weight=1.0),
        right=Option("planning-to-invest", "Planning to invest", weight=0.5),
    ),
    CheckboxesQuestion(
        id="Q2",
        dimension_id="digitalStrategy",
        title="In which of the following ways is your company prepared for (more) digitalisation?",
        options=(
            Option("needs-identified", "Digitalisation needs are identified and aligned with business goals"),
            Option("financial-resources", "Financial resources are identified for at least the next year"),
            Option("ict-infrastructure", "ICT infrastructure is ready to support digitalisation plans"),
            Option("ict-specialists", "ICT specialists are employed or hiring needs are identified"),
            Option("management-ready", "Management is ready to lead the required organisational change"),
            Option("departments-ready", "Affected departments and staff are ready to support the plans"),
            Option("processes-adaptable", "Business and operational processes can be adapted"),
            Option("servitization", "Products are commercialised as a service or digitally supplemented"),
            Option("customer-satisfaction", "Satisfaction with online interactions is monitored regularly"),
            Option("risk-evaluation", "Risks of digitalisation are evaluated"),
        ),
    ),
    # -----------------------------------------------------------------------
    # Dimension: digitalReadiness (Q3-Q4)
    # -----------------------------------------------------------------------
    CheckboxesQuestion(
        id="Q3",
        dimension_id="digitalReadiness",
        title="Which of the following digital technologies are already used by your company?",
        options=(
            Option("connectivity-infrastructure", "Connectivity infrastructure (fibre, cloud, remote access)"),
            Option("company-website", "Company website"),
            Option("web-forms-blogs", "Web forms or blogs/forums to communicate with customers"),
            Option("live-chat-social", "Live chat, social networks and chatbots"),
            Option("e-commerce", "E-commerce sales (B2C, B2B)"),
            Option("e-marketing", "E-marketing (online ads, business social media)"),
            Option("e-government", "E-government including public procurement"),
            Option("remote-collaboration", "Remote collaboration tools"),
            Option("intranet", "Intranet"),
            Option("management-systems", "Information management systems (ERP, CRM, accounting, e-invoicing)"),
        ),
    ),
    ScaleTableQuestion(
        id="Q4",
        dimension_id="digitalReadiness",
        title="Which of the following advanced digital technologies are already in use?",
        rows=(
            Row("simulation-digital-twins", "Simulation and digital twins"),
            Row("vr-ar", "Virtual reality, augmented reality"),
            Row("cad-cam", "Computer-aided design and manufacturing (CAD/CAM)"),
            Row("manufacturing-execution", "Manufacturing execution systems"),
            Row("iot-iiot", "Internet of Things and Industrial IoT"),
            Row("blockchain", "Blockchain technology"),
            Row("additive-manufacturing", "Additive manufacturing (e.g. 3D printing)"),
        ),
        scale_labels=SCALE_LABELS,
    ),
    # -----------------------------------------------------------------------
    # Dimension: humanCentric (Q5-Q6)
    # -----------------------------------------------------------------------
    CheckboxesQuestion(
        id="Q5",
        dimension_id="humanCentric",
        title="What does your company do to re-skill and up-skill staff for digitalisation?",
        options=(
            Option("skills-assessment", "Assesses staff skills to identify gaps"),
            Option("training-plan", "Designs a training plan to upskill staff"),
            Option("short-training", "Organises short training sessions and e-learning"),
            Option("experiential-learning", "Enables experiential and peer learning"),
            Option("internships", "Offers internships and job placements in key areas"),
            Option("external-training", "Sponsors external training"),
            Option("subsidized-training", "Uses subsidised training programmes"),
        ),
    ),
    CheckboxesQuestion(
        id="Q6",
        dimension_id="humanCentric",
        title="How does your company engage and empower staff in digitalisation?",
        options=(
            Option("awareness", "Raises staff awareness of new digital technologies"),
            Option("transparent-communication", "Communicates digitalisation plans transparently"),
            Option("monitor-acceptance", "Monitors staff acceptance and mitigates side effects"),
            Option("involve-employees", "Involves non-ICT staff in designing digitalisation"),
            Option("autonomy-tools", "Gives staff autonomy and suitable digital tools"),
            Option("adapt-jobs", "Redesigns jobs and workflows around how staff want to work"),
            Option("flexible-work", "Enables flexible working arrangements"),
            Option("support-team", "Provides a digital support team for staff"),
        ),
    ),
    # -----------------------------------------------------------------------
    # Dimension: dataManagement (Q7-Q8)
    # -----------------------------------------------------------------------
    CheckboxesQuestion(
        id="Q7",
        dimension_id="dataManagement",
        title="How does your company manage its data?",
        options=(
            Option("data-governance", "Data management policy or action plan is in place"),
            Option("no-digital-collection", "Data is not collected digitally", weight=0.0),
            Option("digital-storage", "Relevant data is stored digitally"),
            Option("data-integration", "Data is integrated across systems"),
            Option("real-time-access", "Data is accessible in real time from different devices and places"),
            Option("systematic-analysis", "Collected data is analysed systematically for decision making"),
            Option("external-enrichment", "Analysis is enriched with external data sources"),
            Option("self-service-analytics", "Analytics is available without expert help (e.g. dashboards)"),
        ),
    ),
    CheckboxesQuestion(
        id="Q8",
        dimension_id="dataManagement",
        title="How is your company's data protected?",
        options=(
            Option("security-policies", "Data security policy is in place"),
            Option("customer-data-protection", "All customer data is protected against cyber attacks"),
            Option("security-training", "Staff are regularly trained in cybersecurity and privacy"),
            Option("threat-monitoring", "Cyber threats are monitored and evaluated regularly"),
            Option("backup-maintained", "A full backup of critical business data is maintained"),
            Option("business-continuity", "A business continuity plan is in place"),
        ),
    ),
    # -----------------------------------------------------------------------
    # Dimension: automation (Q9)
    # -----------------------------------------------------------------------
    ScaleTableQuestion(
        id="Q9",
        dimension_id="automation",
        title="Which of the following technologies and applications does your company already use?",
        rows=(
            Row("nlp", "Natural language processing incl. chatbots and machine translation"),
            Row("computer-vision", "Computer vision / image recognition"),
            Row("speech-processing", "Speech recognition, processing and synthesis"),
            Row("robotics", "Robotics and autonomous devices"),
            Row("business-intelligence", "Business intelligence, analytics and decision support"),
        ),
        scale_labels=SCALE_LABELS,
    ),
    # -----------------------------------------------------------------------
    # Dimension: greenDigitalization (Q10-Q11)
    # -----------------------------------------------------------------------
    CheckboxesQuestion(
        id="Q10",
        dimension_id="greenDigitalization",
        title="How does your company use digital technologies for environmental sustainability?",
        options=(
            Option("sustainable-business-model", "Sustainable business model (e.g. circular economy)"),
            Option("sustainable-services", "Sustainable service offering"),
            Option("sustainable-products", "Sustainable products (eco-design, lifecycle planning)"),
            Option("sustainable-production", "Sustainable production methods and materials"),
            Option("emissions-management", "Emissions, pollution and/or waste management"),
            Option("sustainable-energy", "Sustainable on-site energy generation"),
            Option("material-optimization", "Optimisation of raw material use and cost"),
            Option("transport-reduction", "Reduction of transport and packaging costs"),
            Option("responsible-consumption", "Digital applications encouraging responsible consumption"),
            Option("paperless-processes", "Paperless administrative processes"),
        ),
    ),
    TriStateTableQuestion(
        id="Q11",
        dimension_id="greenDigitalization",
        title="Does your company consider environmental impacts in its digital choices?",
        rows=(
            Row("environmental-strategy", "Environmental standards are part of the digital strategy"),
            Row("environmental-management", "An environmental management system is implemented"),
            Row("procurement-criteria", "Environmental aspects are part of procurement criteria"),
            Row("energy-monitoring", "Energy use of digital technologies is monitored and optimised"),
            Row("equipment-recycling", "Old equipment is actively recycled or reused"),
        ),
    ),
)

DMA_SPEC: AssessmentSpec = AssessmentSpec(
    version="1.0.0",
    language="en",
    dimensions=DIMENSIONS,
    questions=QUESTION_BANK,
)

ALL_DIMENSIONS: list[str] = [d.id for d in DIMENSIONS]

QUESTIONS_BY_ID: dict[str, Question] = {q.id: q for q in QUESTION_BANK}

QUESTIONS_BY_DIMENSION: dict[str, list[Question]] = {
    dimension_id: [q for q in QUESTION_BANK if q.dimension_id == dimension_id]
    for dimension_id in ALL_DIMENSIONS
}
