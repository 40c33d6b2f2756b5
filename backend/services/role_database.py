"""Static role taxonomy, industry tables, and role definitions.

Everything here is read-only reference data consumed by the role
classifier, the JD parser, and the recommendation engines.
"""

import re
from types import MappingProxyType

from models.schemas.roles import IndustryInfo, RoleDefinition

COMMON_ROLES: tuple[str, ...] = tuple(sorted([
    # Technology - AI/ML
    "AI Engineer", "Machine Learning Engineer", "AI/ML Engineer", "Data Scientist",
    "Deep Learning Engineer", "NLP Engineer", "Computer Vision Engineer",
    "MLOps Engineer", "Data Analyst", "Data Engineer",
    "Business Intelligence Analyst", "Analytics Engineer",
    # Technology - Software
    "Software Engineer", "Frontend Developer", "Backend Developer",
    "Full Stack Developer", "DevOps Engineer", "Product Manager", "UX Designer",
    "QA Engineer", "System Administrator", "Network Engineer",
    "Android Developer", "iOS Developer", "Cloud Engineer", "Security Engineer",
    "Database Administrator",
    # Business & Finance
    "Financial Analyst", "Accountant", "Business Analyst", "Project Manager",
    "Product Owner", "Management Consultant", "Investment Banker", "Risk Manager",
    # Marketing & Sales
    "Marketing Manager", "Digital Marketing Manager", "Sales Executive",
    "Account Manager", "Content Writer", "SEO Specialist",
    "Social Media Manager", "Brand Manager",
    # Healthcare
    "Registered Nurse", "Physician", "Medical Assistant", "Pharmacist",
    "Physical Therapist", "Dental Hygienist",
    # Education
    "Teacher", "Professor", "Academic Counselor", "Tutor",
    # Creative
    "Graphic Designer", "Art Director", "Copywriter", "Video Editor",
    "Photographer", "Interior Designer",
    # HR & Admin
    "Human Resources Manager", "Recruiter", "Administrative Assistant",
    "Office Manager",
    # Engineering (non-software)
    "Civil Engineer", "Mechanical Engineer", "Electrical Engineer",
    "Chemical Engineer",
    # Service & Trades
    "Chef", "Electrician", "Plumber", "Customer Service Representative",
    "Hotel Manager",
]))

_EXTENDED_ROLES: tuple[str, ...] = (
    # Engineering
    "Senior Software Engineer", "Staff Software Engineer", "Principal Engineer",
    "Frontend Engineer", "Backend Engineer", "Full Stack Engineer",
    "Web Developer", "Application Developer",
    # Data & AI
    "Senior Data Scientist", "ML Engineer", "Applied AI Engineer",
    # Cloud & DevOps
    "Site Reliability Engineer", "SRE", "Platform Engineer", "Cloud Architect",
    "AWS Engineer", "Azure Engineer", "Infrastructure Engineer",
    # Mobile
    "Mobile Developer", "React Native Developer", "Flutter Developer",
    # Specialized development
    "React Developer", "Angular Developer", "Vue.js Developer",
    "Node.js Developer", "Python Developer", "Java Developer",
    "Golang Developer", "Rust Developer", ".NET Developer", "PHP Developer",
    "Ruby on Rails Developer",
    # QA & Security
    "Quality Assurance Engineer", "Test Engineer", "SDET", "Automation Engineer",
    "Cybersecurity Analyst", "Information Security Analyst",
    "Penetration Tester", "Security Architect",
    # Leadership
    "Technical Lead", "Tech Lead", "Engineering Manager",
    "Director of Engineering", "VP of Engineering", "CTO",
    "Solutions Architect", "Enterprise Architect", "Technical Architect",
    # Product & Design
    "Senior Product Manager", "Program Manager", "Technical Program Manager",
    "Scrum Master", "Agile Coach", "UI Designer", "UI/UX Designer",
    "Product Designer", "Interaction Designer", "Visual Designer",
    # Business & Analytics
    "Systems Analyst", "Technical Writer", "Documentation Engineer",
    "Customer Success Manager", "Technical Account Manager",
    "Pre-Sales Engineer", "Sales Engineer", "Solutions Consultant",
    # Other tech
    "Network Administrator", "DBA", "Blockchain Developer", "Game Developer",
    "Embedded Systems Engineer", "Firmware Engineer", "Hardware Engineer",
    # Operations & Supply Chain
    "Operations Manager", "Operations Analyst", "Supply Chain Analyst",
    "Supply Chain Manager", "Logistics Coordinator", "Logistics Manager",
    "Procurement Specialist", "Procurement Manager", "Warehouse Manager",
    "Inventory Analyst",
    # Manufacturing
    "Manufacturing Engineer", "Process Engineer", "Industrial Engineer",
    "Quality Engineer", "Quality Manager", "Plant Manager",
    # Legal
    "Legal Counsel", "Corporate Lawyer", "Attorney", "Paralegal",
    "Legal Assistant",
    # Retail & Customer
    "Retail Manager", "Store Manager", "Merchandiser",
    "Customer Success Associate", "Customer Support Specialist",
    "Customer Service Manager", "Call Center Executive",
    # Government
    "Public Policy Analyst", "Program Officer", "Government Relations Manager",
    # Non-tech
    "Content Strategist", "Brand Strategist", "HR Manager",
    "HR Business Partner", "Technical Recruiter", "Consultant",
)

# Common roles first so ties in fuzzy ranking favour the canonical title.
ROLE_TAXONOMY: tuple[str, ...] = tuple(dict.fromkeys(COMMON_ROLES + _EXTENDED_ROLES))

ABBREVIATIONS = MappingProxyType({
    "swe": ("software engineer",),
    "sde": ("software engineer", "software developer"),
    "fe": ("frontend", "front end"),
    "be": ("backend", "back end"),
    "fs": ("full stack", "fullstack"),
    "ml": ("machine learning",),
    "ds": ("data scientist", "data science"),
    "da": ("data analyst",),
    "de": ("data engineer", "devops engineer"),
    "pm": ("product manager", "project manager", "program manager"),
    "qa": ("qa engineer", "quality assurance"),
    "ux": ("ux designer", "ui ux"),
    "ui": ("ui designer", "ui ux"),
    "sre": ("site reliability", "sre"),
    "tpm": ("technical program manager",),
    "em": ("engineering manager",),
})

# Per-industry vocabulary used to vote an industry from JD text.
INDUSTRY_KEYWORDS = MappingProxyType({
    "technology": (
        "python", "java", "javascript", "typescript", "react", "angular", "vue",
        "node", "sql", "nosql", "aws", "azure", "gcp", "docker", "kubernetes",
        "ci/cd", "git", "agile", "scrum", "api", "machine learning",
        "data science", "ai", "cloud", "microservices", "devops", "full stack",
        "backend", "frontend", "mobile", "ios", "android", "testing", "security",
        "database",
    ),
    "healthcare": (
        "patient care", "clinical", "medical", "nursing", "ehr", "emr", "hipaa",
        "medication", "vital signs", "bls", "acls", "cpr", "triage", "assessment",
        "diagnosis", "treatment", "documentation", "patient education",
        "infection control", "sterile technique", "pharmacy", "radiology",
        "laboratory", "rehabilitation", "mental health",
    ),
    "finance": (
        "accounting", "gaap", "ifrs", "financial analysis", "budgeting",
        "forecasting", "audit", "tax", "reconciliation", "financial statements",
        "p&l", "balance sheet", "cash flow", "excel", "sap", "oracle",
        "quickbooks", "erp", "compliance", "risk management", "investment",
        "portfolio", "banking", "credit", "underwriting", "valuation",
    ),
    "education": (
        "teaching", "curriculum", "lesson planning", "classroom management",
        "student assessment", "differentiated instruction", "special education",
        "iep", "common core", "pedagogy", "learning management",
        "google classroom", "canvas", "blackboard", "educational technology",
        "grading", "parent communication", "professional development",
        "mentoring students",
    ),
    "sales": (
        "sales", "revenue", "quota", "pipeline", "crm", "salesforce", "hubspot",
        "lead generation", "prospecting", "cold calling", "closing",
        "negotiation", "account management", "b2b", "b2c", "territory",
        "client relationships", "presentations", "demos", "rfp", "contracts",
    ),
    "marketing": (
        "marketing", "digital marketing", "seo", "sem", "ppc", "social media",
        "content", "branding", "campaigns", "analytics", "google analytics",
        "conversion", "roi", "email marketing", "automation", "hubspot",
        "copywriting", "brand awareness", "market research",
        "competitive analysis", "customer acquisition", "retention",
    ),
    "construction": (
        "construction", "project management", "autocad", "civil 3d", "bim",
        "revit", "site supervision", "blueprints", "building codes", "osha",
        "safety", "estimating", "scheduling", "subcontractors", "inspections",
        "permits", "structural", "concrete", "plumbing", "electrical", "hvac",
        "surveying", "quantity surveying",
    ),
    "legal": (
        "legal", "litigation", "contracts", "corporate law", "compliance",
        "due diligence", "legal research", "westlaw", "lexisnexis", "drafting",
        "negotiations", "court", "depositions", "discovery",
        "intellectual property", "employment law", "real estate law",
        "mergers", "acquisitions", "regulatory", "privacy", "gdpr",
    ),
    "hospitality": (
        "hospitality", "customer service", "guest relations", "front desk",
        "reservations", "food service", "culinary", "menu planning",
        "food safety", "servsafe", "banquets", "events", "hotel operations",
        "housekeeping", "concierge", "restaurant management", "pos systems",
        "inventory", "scheduling", "tourism", "travel",
    ),
    "hr": (
        "human resources", "recruitment", "talent acquisition", "onboarding",
        "employee relations", "performance management", "compensation",
        "benefits", "hris", "workday", "successfactors", "labor law",
        "compliance", "training", "development", "engagement", "retention",
        "diversity", "inclusion", "payroll", "background checks",
    ),
    "logistics": (
        "logistics", "supply chain", "warehouse", "inventory", "distribution",
        "transportation", "shipping", "freight", "wms", "tms", "erp", "sap",
        "forecasting", "demand planning", "procurement", "vendor management",
        "customs", "import", "export", "last mile", "3pl", "fulfillment",
        "fleet management",
    ),
    "trades": (
        "electrical", "plumbing", "hvac", "carpentry", "welding", "installation",
        "repair", "maintenance", "troubleshooting", "blueprints", "schematics",
        "code compliance", "safety", "osha", "tools", "equipment",
        "residential", "commercial", "industrial", "journeyman", "apprentice",
        "licensed",
    ),
})

# Ordered (pattern, industry) rules for short job titles. First match wins.
INDUSTRY_TITLE_RULES: tuple[tuple[re.Pattern, str], ...] = tuple(
    (re.compile(pattern, re.IGNORECASE), industry)
    for pattern, industry in (
        (r"software|developer|engineer|programmer|devops|data scientist|tech lead|architect|qa|frontend|backend|fullstack", "technology"),
        (r"nurse|doctor|physician|medical|healthcare|clinical|pharmacy|patient|hospital", "healthcare"),
        (r"accountant|finance|banker|analyst|auditor|tax|treasury|investment|portfolio", "finance"),
        (r"teacher|professor|instructor|principal|education|academic|tutor|lecturer", "education"),
        (r"marketing|brand|seo|sem|content|social media|digital market|growth", "marketing"),
        (r"sales|account executive|business development|revenue|quota|closer", "sales"),
        (r"manufacturing|production|quality|plant|assembly|lean|six sigma", "manufacturing"),
        (r"construction|civil|structural|site|building|project manager", "construction"),
        (r"lawyer|attorney|legal|counsel|paralegal|compliance|contract", "legal"),
        (r"government|civil servant|public sector|municipal|federal|policy", "government"),
        (r"hotel|hospitality|chef|cook|restaurant|tourism|travel|event", "hospitality"),
        (r"retail|store|merchandis|e-commerce|shop|sales associate", "retail"),
        (r"logistics|supply chain|warehouse|distribution|fleet|shipping", "logistics"),
        (r"pilot|flight|aviation|airline|airport|aircraft", "aviation"),
        (r"automotive|\bcar\b|vehicle|motor|mechanic|dealership", "automotive"),
        (r"journalist|producer|editor|media|content creator|film|video", "media"),
        (r"designer|artist|photographer|creative|fashion|interior", "arts"),
        (r"farm|agriculture|agro|crop|food scientist|agronomist", "agriculture"),
        (r"energy|\boil\b|\bgas\b|petroleum|solar|renewable|utility|power", "energy"),
        (r"telecom|network|infrastructure|wireless", "telecommunications"),
        (r"real estate|property|broker|realtor|appraiser", "real_estate"),
        (r"nonprofit|ngo|charity|foundation|volunteer|fundrais", "nonprofit"),
        (r"consultant|advisor|strategy|management consult", "consulting"),
        (r"\bhr\b|human resources|recruiter|talent|people ops|hrbp", "hr"),
        (r"research|scientist|\blab\b|r&d|phd", "research"),
        (r"electrician|plumber|carpenter|hvac|welder|technician", "trades"),
        (r"security|guard|loss prevention|cybersecurity|investigation", "security"),
        (r"trainer|coach|fitness|personal train|sports|gym", "sports"),
        (r"stylist|beautician|esthetician|makeup|\bspa\b|salon", "beauty"),
    )
)

# Ordered (pattern, family) rules used to bucket a role title.
ROLE_CATEGORY_RULES: tuple[tuple[re.Pattern, str], ...] = tuple(
    (re.compile(pattern), family)
    for pattern, family in (
        (r"data|analyst|scientist|analytics|\bbi\b", "Data"),
        (r"engineer|developer|software|full stack|frontend|backend", "Software"),
        (r"product|program|project", "Product"),
        (r"design|\bux\b|\bui\b|graphic|visual", "Design"),
        (r"marketing|seo|content|brand", "Marketing"),
        (r"sales|account|pre-sales", "Sales"),
        (r"finance|accountant|investment|risk", "Finance"),
        (r"\bhr\b|recruit|talent", "HR"),
        (r"health|medical|nurse|physician|pharmacist", "Healthcare"),
        (r"teacher|professor|tutor|education", "Education"),
        (r"operations|supply chain|procurement|inventory", "Operations"),
        (r"legal|\blaw|attorney|paralegal|counsel", "Legal"),
        (r"manufacturing|industrial|process|plant|quality", "Manufacturing"),
        (r"logistics|warehouse|shipping", "Logistics"),
        (r"hotel|hospitality|chef|front office", "Hospitality"),
        (r"government|public policy|program officer|civil service", "Government"),
        (r"customer support|customer success|call center|service representative", "Customer Support"),
        (r"retail|store|merchandiser", "Retail"),
    )
)


def _industry(id, name, description, skills, bodies, style):
    return IndustryInfo(
        id=id, name=name, description=description,
        key_skill_categories=tuple(skills), certification_bodies=tuple(bodies),
        resume_style=style,
    )


INDUSTRIES = MappingProxyType({info.id: info for info in (
    _industry("technology", "Technology & IT", "Software, hardware, IT services, and digital products",
              ["Programming", "Cloud", "Data", "Security", "Methodologies"],
              ["AWS", "Google", "Microsoft", "CompTIA", "Cisco"], "technical"),
    _industry("healthcare", "Healthcare & Medical", "Hospitals, clinics, pharmaceuticals, and medical services",
              ["Patient Care", "Medical Knowledge", "Clinical Skills", "Compliance", "EMR Systems"],
              ["State Medical Boards", "ANCC", "NBRC", "ASCP"], "formal"),
    _industry("finance", "Finance & Banking", "Banks, investment firms, insurance, and financial services",
              ["Financial Analysis", "Accounting", "Compliance", "Risk Management", "Software"],
              ["CPA", "CFA", "ACCA", "FRM"], "formal"),
    _industry("education", "Education & Training", "Schools, universities, training centers, and EdTech",
              ["Teaching", "Curriculum Development", "Student Assessment", "Technology Integration"],
              ["State Education Boards", "TEFL", "TESOL"], "professional"),
    _industry("marketing", "Marketing & Advertising", "Brand management, digital marketing, advertising agencies",
              ["Digital Marketing", "Analytics", "Content", "Social Media", "Branding"],
              ["Google", "HubSpot", "Meta", "Hootsuite"], "creative"),
    _industry("sales", "Sales & Business Development", "Sales teams, account management, business development",
              ["Negotiation", "CRM", "Lead Generation", "Closing", "Relationship Building"],
              ["Salesforce", "HubSpot", "Miller Heiman"], "professional"),
    _industry("manufacturing", "Manufacturing & Production", "Factories, production plants, quality control",
              ["Lean Manufacturing", "Quality Control", "Safety", "Process Improvement"],
              ["ASQ", "Six Sigma", "APICS"], "technical"),
    _industry("construction", "Construction & Real Estate", "Building, civil engineering, architecture, property",
              ["Project Management", "AutoCAD", "Building Codes", "Safety", "Estimation"],
              ["PMP", "LEED", "OSHA"], "technical"),
    _industry("legal", "Legal & Compliance", "Law firms, corporate legal, compliance departments",
              ["Legal Research", "Contract Law", "Litigation", "Compliance", "Negotiation"],
              ["Bar Association", "CCEP"], "formal"),
    _industry("government", "Government & Public Sector", "Government agencies, public administration, civil service",
              ["Public Policy", "Administration", "Stakeholder Management", "Compliance"],
              ["Government-specific certifications"], "formal"),
    _industry("hospitality", "Hospitality & Tourism", "Hotels, restaurants, travel, tourism",
              ["Customer Service", "Operations", "Food & Beverage", "Event Planning"],
              ["AHLEI", "ServSafe", "IATA"], "professional"),
    _industry("retail", "Retail & E-commerce", "Stores, e-commerce, merchandising, inventory",
              ["Sales", "Customer Service", "Inventory", "Visual Merchandising", "POS Systems"],
              ["NRF", "Retail Industry certifications"], "professional"),
    _industry("logistics", "Logistics & Supply Chain", "Warehousing, transportation, supply chain management",
              ["Supply Chain", "Inventory Management", "Transportation", "ERP Systems"],
              ["APICS", "CSCMP", "ISM"], "technical"),
    _industry("aviation", "Aviation & Aerospace", "Airlines, airports, aerospace manufacturing",
              ["Safety", "Technical Skills", "Customer Service", "Regulations"],
              ["FAA", "EASA", "IATA"], "formal"),
    _industry("automotive", "Automotive", "Car manufacturing, dealerships, repair services",
              ["Mechanical Skills", "Diagnostics", "Sales", "Quality Control"],
              ["ASE", "Manufacturer certifications"], "technical"),
    _industry("media", "Media & Entertainment", "TV, film, publishing, digital media, gaming",
              ["Content Creation", "Editing", "Production", "Digital Media"],
              ["Industry-specific"], "creative"),
    _industry("arts", "Arts & Design", "Graphic design, fine arts, photography, fashion",
              ["Design Software", "Creative Skills", "Portfolio", "Client Management"],
              ["Adobe", "Design associations"], "creative"),
    _industry("agriculture", "Agriculture & Farming", "Farming, agribusiness, food production",
              ["Crop Management", "Equipment Operation", "Sustainability", "Food Safety"],
              ["CCA", "Food safety certifications"], "technical"),
    _industry("energy", "Energy & Utilities", "Oil & gas, renewable energy, utilities",
              ["Technical Skills", "Safety", "Regulations", "Equipment Operation"],
              ["API", "OSHA", "NABCEP"], "technical"),
    _industry("telecommunications", "Telecommunications", "Telecom providers, network infrastructure",
              ["Networking", "Infrastructure", "Customer Service", "Technical Support"],
              ["Cisco", "CompTIA", "Telecom-specific"], "technical"),
    _industry("real_estate", "Real Estate", "Property sales, property management, development",
              ["Sales", "Negotiation", "Property Law", "Market Analysis"],
              ["State Real Estate Boards", "NAR"], "professional"),
    _industry("nonprofit", "Nonprofit & NGO", "Charities, NGOs, foundations, social enterprises",
              ["Fundraising", "Program Management", "Community Outreach", "Grant Writing"],
              ["CFRE", "Nonprofit-specific"], "professional"),
    _industry("consulting", "Consulting", "Management consulting, strategy, advisory services",
              ["Analysis", "Strategy", "Presentation", "Problem Solving"],
              ["CMC", "Industry-specific"], "formal"),
    _industry("hr", "Human Resources", "HR departments, recruitment, talent management",
              ["Recruitment", "Employee Relations", "HRIS", "Compliance"],
              ["SHRM", "HRCI", "CIPD"], "professional"),
    _industry("research", "Research & Science", "Academic research, R&D, laboratories",
              ["Research Methods", "Data Analysis", "Lab Skills", "Publications"],
              ["Field-specific certifications"], "formal"),
    _industry("trades", "Skilled Trades", "Electricians, plumbers, carpenters, mechanics",
              ["Technical Skills", "Safety", "Tools", "Building Codes"],
              ["Trade unions", "State licensing boards"], "technical"),
    _industry("security", "Security Services", "Physical security, cybersecurity, private investigation",
              ["Security Protocols", "Surveillance", "Risk Assessment", "Emergency Response"],
              ["ASIS", "CompTIA Security+", "CISSP"], "formal"),
    _industry("sports", "Sports & Fitness", "Athletics, fitness centers, sports management",
              ["Fitness Knowledge", "Coaching", "Sports Science", "Client Management"],
              ["NASM", "ACE", "NSCA", "Sports federations"], "professional"),
    _industry("beauty", "Beauty & Wellness", "Salons, spas, cosmetics, wellness centers",
              ["Technical Skills", "Customer Service", "Product Knowledge", "Trends"],
              ["State cosmetology boards", "Brand certifications"], "creative"),
    _industry("other", "Other Industries", "Miscellaneous and emerging industries", [], [], "professional"),
)})


ROLE_DEFINITIONS: tuple[RoleDefinition, ...] = (
    RoleDefinition(
        id="software-engineer",
        name="Software Engineer",
        aliases=("Software Developer", "Programmer", "Application Developer",
                 "Backend Developer", "Frontend Developer"),
        industry="technology",
        levels=("fresher", "junior", "mid", "senior", "lead"),
        core_skills=("Programming", "Problem Solving", "Data Structures",
                     "Algorithms", "System Design"),
        tools=("Git", "JIRA", "VS Code", "Docker", "AWS/Azure/GCP"),
        certifications=("AWS Certified", "Azure Certified", "Google Cloud Certified"),
        ats_keywords=("software development", "programming", "agile", "scrum",
                      "API", "database", "testing"),
        action_verbs=("Developed", "Engineered", "Architected", "Implemented",
                      "Optimized", "Debugged", "Deployed"),
        metric_examples=("Reduced load time by 40%", "Handled 10K+ daily users",
                         "Decreased bugs by 30%"),
        tone_style="technical",
        photo_recommendation="not_recommended",
        demand_level="high",
        growth_trend="growing",
        fresher_friendly=True,
        fresher_alternatives=("Academic projects", "Personal projects",
                              "Open source contributions", "Hackathons", "Internships"),
    ),
    RoleDefinition(
        id="registered-nurse",
        name="Registered Nurse",
        aliases=("RN", "Staff Nurse", "Clinical Nurse", "Bedside Nurse"),
        industry="healthcare",
        levels=("fresher", "junior", "mid", "senior", "lead"),
        core_skills=("Patient Care", "Clinical Assessment", "Medication Administration",
                     "Critical Thinking", "Communication"),
        tools=("EMR/EHR Systems", "Medical Equipment", "Vital Signs Monitors"),
        certifications=("RN License", "BLS", "ACLS", "Specialty certifications"),
        ats_keywords=("patient care", "nursing", "EMR", "medication administration",
                      "clinical", "vital signs", "patient education"),
        action_verbs=("Administered", "Monitored", "Assessed", "Coordinated",
                      "Educated", "Documented", "Collaborated"),
        metric_examples=("Managed 8-10 patients per shift",
                         "Achieved 95% patient satisfaction",
                         "Reduced medication errors by 20%"),
        photo_recommendation="optional",
        demand_level="high",
        growth_trend="growing",
        fresher_friendly=True,
        fresher_alternatives=("Clinical rotations", "Nursing internships",
                              "Volunteer experience", "Healthcare certifications"),
    ),
    RoleDefinition(
        id="accountant",
        name="Accountant",
        aliases=("Staff Accountant", "Financial Accountant", "General Accountant", "Bookkeeper"),
        industry="finance",
        levels=("fresher", "junior", "mid", "senior", "lead", "manager"),
        core_skills=("Financial Reporting", "GAAP/IFRS", "Reconciliation",
                     "Budgeting", "Attention to Detail"),
        tools=("Excel", "QuickBooks", "SAP", "Oracle", "ERP Systems"),
        certifications=("CPA", "CMA", "ACCA", "CA"),
        ats_keywords=("accounting", "financial statements", "GAAP", "reconciliation",
                      "budgeting", "audit", "tax"),
        action_verbs=("Prepared", "Reconciled", "Analyzed", "Audited", "Managed",
                      "Streamlined", "Reported"),
        tone_style="formal",
        demand_level="high",
        fresher_friendly=True,
        fresher_alternatives=("Accounting coursework", "Internships",
                              "Bookkeeping experience", "CPA exam progress"),
    ),
    RoleDefinition(
        id="teacher",
        name="Teacher",
        aliases=("Educator", "Instructor", "School Teacher", "Classroom Teacher"),
        industry="education",
        levels=("fresher", "junior", "mid", "senior", "lead"),
        core_skills=("Classroom Management", "Lesson Planning", "Student Assessment",
                     "Communication", "Patience"),
        tools=("Learning Management Systems", "Google Classroom", "Smart Boards",
               "Assessment Tools"),
        certifications=("Teaching License", "TEFL/TESOL", "Subject-specific certifications"),
        ats_keywords=("teaching", "curriculum", "lesson planning", "student assessment",
                      "classroom management", "differentiated instruction"),
        action_verbs=("Taught", "Developed", "Assessed", "Implemented", "Facilitated",
                      "Mentored", "Collaborated"),
        photo_recommendation="recommended",
        fresher_friendly=True,
        fresher_alternatives=("Student teaching", "Tutoring experience",
                              "Volunteer teaching", "Education coursework"),
    ),
    RoleDefinition(
        id="sales-executive",
        name="Sales Executive",
        aliases=("Sales Representative", "Account Executive", "Sales Associate",
                 "Business Development Representative"),
        industry="sales",
        levels=("fresher", "junior", "mid", "senior", "lead", "manager"),
        core_skills=("Negotiation", "Communication", "Relationship Building",
                     "Product Knowledge", "Closing"),
        tools=("Salesforce", "HubSpot", "LinkedIn Sales Navigator", "ZoomInfo"),
        certifications=("Salesforce Certified", "HubSpot Sales Certification"),
        ats_keywords=("sales", "revenue", "targets", "CRM", "lead generation",
                      "closing", "pipeline"),
        action_verbs=("Generated", "Closed", "Exceeded", "Negotiated", "Developed",
                      "Cultivated", "Achieved"),
        photo_recommendation="recommended",
        demand_level="high",
        fresher_friendly=True,
        fresher_alternatives=("Retail sales experience", "Customer service",
                              "Sales internships", "Campus sales roles"),
    ),
    RoleDefinition(
        id="chef",
        name="Chef",
        aliases=("Cook", "Head Chef", "Sous Chef", "Executive Chef", "Line Cook"),
        industry="hospitality",
        levels=("fresher", "junior", "mid", "senior", "lead", "executive"),
        core_skills=("Culinary Skills", "Menu Development", "Food Safety",
                     "Kitchen Management", "Creativity"),
        tools=("Kitchen Equipment", "POS Systems", "Inventory Management"),
        certifications=("ServSafe", "Culinary degree", "Food Handler Certificate"),
        ats_keywords=("culinary", "menu development", "food safety",
                      "kitchen management", "food cost", "cuisine"),
        action_verbs=("Prepared", "Created", "Developed", "Managed", "Trained",
                      "Reduced", "Implemented"),
        photo_recommendation="recommended",
        fresher_friendly=True,
        fresher_alternatives=("Culinary school projects", "Kitchen apprenticeships",
                              "Catering experience"),
    ),
    RoleDefinition(
        id="civil-engineer",
        name="Civil Engineer",
        aliases=("Structural Engineer", "Site Engineer", "Construction Engineer",
                 "Project Engineer"),
        industry="construction",
        levels=("fresher", "junior", "mid", "senior", "lead", "manager"),
        core_skills=("Structural Analysis", "AutoCAD", "Project Management",
                     "Site Supervision", "Building Codes"),
        tools=("AutoCAD", "Civil 3D", "STAAD", "Primavera", "MS Project"),
        certifications=("PE License", "PMP", "LEED", "OSHA"),
        ats_keywords=("civil engineering", "structural design", "construction",
                      "AutoCAD", "site supervision", "project management"),
        action_verbs=("Designed", "Supervised", "Managed", "Analyzed", "Coordinated",
                      "Inspected", "Delivered"),
        tone_style="technical",
        fresher_friendly=True,
        fresher_alternatives=("Engineering projects", "Internships",
                              "Design competitions", "AutoCAD certifications"),
    ),
    RoleDefinition(
        id="lawyer",
        name="Lawyer",
        aliases=("Attorney", "Legal Counsel", "Advocate", "Solicitor", "Barrister"),
        industry="legal",
        levels=("fresher", "junior", "mid", "senior", "partner"),
        core_skills=("Legal Research", "Legal Writing", "Negotiation", "Litigation",
                     "Client Counseling"),
        tools=("Westlaw", "LexisNexis", "Case Management Software", "Document Review Tools"),
        certifications=("Bar Admission", "Specialized certifications"),
        ats_keywords=("legal", "litigation", "contracts", "compliance", "negotiation",
                      "due diligence", "counsel"),
        action_verbs=("Represented", "Negotiated", "Drafted", "Litigated", "Counseled",
                      "Resolved", "Analyzed"),
        tone_style="formal",
        photo_recommendation="not_recommended",
    ),
    RoleDefinition(
        id="digital-marketing-manager",
        name="Digital Marketing Manager",
        aliases=("Online Marketing Manager", "Digital Marketing Specialist", "Growth Marketer"),
        industry="marketing",
        levels=("junior", "mid", "senior", "manager", "director"),
        core_skills=("Digital Strategy", "SEO/SEM", "Social Media", "Analytics",
                     "Content Marketing"),
        tools=("Google Analytics", "Google Ads", "Facebook Ads", "HubSpot", "SEMrush"),
        certifications=("Google Ads", "Google Analytics", "HubSpot", "Facebook Blueprint"),
        ats_keywords=("digital marketing", "SEO", "SEM", "social media",
                      "Google Analytics", "conversion", "ROI"),
        action_verbs=("Developed", "Executed", "Optimized", "Increased", "Analyzed",
                      "Managed", "Launched"),
        tone_style="creative",
        demand_level="high",
        growth_trend="growing",
        fresher_friendly=True,
        fresher_alternatives=("Personal projects", "Freelance work",
                              "Marketing internships", "Google certifications"),
    ),
    RoleDefinition(
        id="electrician",
        name="Electrician",
        aliases=("Electrical Technician", "Journeyman Electrician", "Master Electrician"),
        industry="trades",
        levels=("fresher", "junior", "mid", "senior", "lead"),
        core_skills=("Electrical Installation", "Troubleshooting", "Blueprint Reading",
                     "Safety Protocols", "Code Compliance"),
        tools=("Multimeter", "Wire Strippers", "Conduit Benders", "Testing Equipment"),
        certifications=("Electrician License", "OSHA", "Specialized certifications"),
        ats_keywords=("electrical", "wiring", "installation", "troubleshooting",
                      "NEC code", "safety", "residential", "commercial"),
        action_verbs=("Installed", "Troubleshot", "Repaired", "Maintained", "Upgraded",
                      "Inspected", "Wired"),
        tone_style="technical",
        photo_recommendation="not_recommended",
        demand_level="high",
        growth_trend="growing",
        fresher_friendly=True,
        fresher_alternatives=("Trade school projects", "Apprenticeship",
                              "Helper experience", "Safety certifications"),
    ),
    RoleDefinition(
        id="logistics-manager",
        name="Logistics Manager",
        aliases=("Supply Chain Manager", "Warehouse Manager", "Distribution Manager"),
        industry="logistics",
        levels=("mid", "senior", "manager", "director"),
        core_skills=("Supply Chain Management", "Inventory Control", "Transportation",
                     "Vendor Management", "Cost Optimization"),
        tools=("SAP", "Oracle", "WMS Systems", "TMS Systems", "Excel"),
        certifications=("CSCP", "CLTD", "Six Sigma", "PMP"),
        ats_keywords=("logistics", "supply chain", "inventory", "transportation",
                      "warehouse", "distribution", "cost reduction"),
        action_verbs=("Managed", "Optimized", "Reduced", "Coordinated", "Streamlined",
                      "Negotiated", "Implemented"),
        tone_style="technical",
        growth_trend="growing",
    ),
    RoleDefinition(
        id="hr-manager",
        name="HR Manager",
        aliases=("Human Resources Manager", "People Manager", "HR Business Partner"),
        industry="hr",
        levels=("mid", "senior", "manager", "director"),
        core_skills=("Employee Relations", "Recruitment", "Performance Management",
                     "HR Policies", "Compliance"),
        tools=("Workday", "SAP SuccessFactors", "BambooHR", "LinkedIn Recruiter"),
        certifications=("SHRM-CP", "SHRM-SCP", "PHR", "SPHR"),
        ats_keywords=("human resources", "recruitment", "employee relations",
                      "performance management", "HRIS", "compliance"),
        action_verbs=("Recruited", "Developed", "Implemented", "Managed", "Resolved",
                      "Streamlined", "Trained"),
        photo_recommendation="recommended",
    ),
)

# Photo expectation and ATS prevalence per country code.
REGION_PHOTO_REQUIREMENTS = MappingProxyType({
    "US": "discouraged", "CA": "discouraged", "UK": "discouraged", "IE": "discouraged",
    "DE": "expected", "FR": "expected", "NL": "optional", "BE": "expected",
    "CH": "expected", "AT": "expected", "ES": "expected", "IT": "expected",
    "PT": "expected", "SE": "discouraged", "NO": "discouraged", "DK": "optional",
    "FI": "optional", "PL": "expected", "AE": "required", "SA": "required",
    "QA": "required", "KW": "required", "IN": "expected", "SG": "optional",
    "AU": "discouraged", "NZ": "discouraged", "MY": "expected", "PH": "expected",
    "JP": "required", "KR": "required", "CN": "required", "HK": "optional",
    "MX": "expected", "BR": "expected", "ZA": "optional",
})

REGION_ATS_PREVALENCE = MappingProxyType({
    "US": "very_high", "CA": "very_high", "UK": "high", "IE": "high",
    "DE": "medium", "FR": "medium", "NL": "high", "BE": "medium", "CH": "high",
    "AT": "medium", "ES": "medium", "IT": "medium", "PT": "medium",
    "SE": "high", "NO": "high", "DK": "high", "FI": "high", "PL": "medium",
    "AE": "high", "SA": "medium", "QA": "high", "KW": "medium",
    "IN": "very_high", "SG": "very_high", "AU": "very_high", "NZ": "high",
    "MY": "high", "PH": "high", "JP": "medium", "KR": "high", "CN": "high",
    "HK": "very_high", "MX": "high", "BR": "high", "ZA": "high",
})


def get_industry_info(industry: str) -> IndustryInfo:
    return INDUSTRIES.get(industry, INDUSTRIES["other"])
